# src/atlas_typedconfig/core/de/protocol.py
"""
Protocolo de deserialização pull-based, dirigido por tipo.

Este módulo define a costura entre o engine e quem descreve os tipos de
destino. O lado do tipo pede formas ao `Deserializer` ("um bool", "uma
sequência", "uma struct com estes campos") passando um `Visitor`; o
`Deserializer` responde chamando o método `visit_*` correspondente.
Formas compostas entregam ao visitor um accessor (`MapAccess` ou
`SeqAccess`) que é consumido de forma incremental.

Um *seed* é qualquer callable `(Deserializer) -> valor`; é assim que o
lado do tipo decodifica uma chave, um valor ou um elemento.

Componentes principais:
    - Visitor      → um método por forma primitiva + ganchos compostos
    - Deserializer → um método por forma pedida
    - MapAccess    → iteração chave/valor de uma struct
    - SeqAccess    → iteração de elementos de uma sequência

Limites explícitos:
    - Não contém lógica de travessia do documento
    - Não conhece dataclasses (ver `derive.py`)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Sequence, TypeVar

from ..document.model import StrView
from .errors import invalid_type


T = TypeVar("T")

Seed = Callable[["Deserializer"], T]


class Visitor(ABC):
    """
    Recebe o valor produzido pelo `Deserializer`.

    Cada visitor declara `expecting` e sobrescreve apenas os métodos das
    formas que aceita; os demais falham com um erro `Custom` de tipo
    inválido.
    """

    expecting = "a value"

    def visit_bool(self, value: bool) -> Any:
        raise invalid_type(f"boolean `{value}`", self.expecting)

    def visit_int(self, value: int) -> Any:
        raise invalid_type(f"integer `{value}`", self.expecting)

    def visit_float(self, value: float) -> Any:
        raise invalid_type(f"floating point `{value}`", self.expecting)

    def visit_char(self, value: str) -> Any:
        return self.visit_string(value)

    def visit_borrowed_str(self, value: StrView) -> Any:
        return self.visit_string(str(value))

    def visit_string(self, value: str) -> Any:
        raise invalid_type(f"string {value!r}", self.expecting)

    def visit_none(self) -> Any:
        raise invalid_type("none", self.expecting)

    def visit_some(self, deserializer: "Deserializer") -> Any:
        raise invalid_type("option", self.expecting)

    def visit_seq(self, seq: "SeqAccess") -> Any:
        raise invalid_type("sequence", self.expecting)

    def visit_map(self, fields: "MapAccess") -> Any:
        raise invalid_type("map", self.expecting)


class MapAccess(ABC):
    @abstractmethod
    def next_key(self, seed: Seed) -> Optional[Any]:
        """Decodifica a próxima chave com `seed`, ou retorna None ao esgotar."""

    @abstractmethod
    def next_value(self, seed: Seed) -> Any:
        """Decodifica o valor da chave corrente com `seed`."""


class SeqAccess(ABC):
    @abstractmethod
    def next_element(self, seed: Seed) -> tuple:
        """
        Decodifica o próximo elemento.

        Returns:
            tuple: `(True, valor)` ou `(False, None)` ao esgotar. O par
            explícito evita confundir um elemento `None` com o fim.
        """

    def size_hint(self) -> Optional[int]:
        return None


class Deserializer(ABC):
    """Formas que um tipo de destino pode pedir."""

    @abstractmethod
    def deserialize_bool(self, visitor: Visitor) -> Any: ...

    @abstractmethod
    def deserialize_i8(self, visitor: Visitor) -> Any: ...

    @abstractmethod
    def deserialize_i16(self, visitor: Visitor) -> Any: ...

    @abstractmethod
    def deserialize_i32(self, visitor: Visitor) -> Any: ...

    @abstractmethod
    def deserialize_i64(self, visitor: Visitor) -> Any: ...

    @abstractmethod
    def deserialize_u8(self, visitor: Visitor) -> Any: ...

    @abstractmethod
    def deserialize_u16(self, visitor: Visitor) -> Any: ...

    @abstractmethod
    def deserialize_u32(self, visitor: Visitor) -> Any: ...

    @abstractmethod
    def deserialize_u64(self, visitor: Visitor) -> Any: ...

    @abstractmethod
    def deserialize_f32(self, visitor: Visitor) -> Any: ...

    @abstractmethod
    def deserialize_f64(self, visitor: Visitor) -> Any: ...

    @abstractmethod
    def deserialize_char(self, visitor: Visitor) -> Any: ...

    @abstractmethod
    def deserialize_str(self, visitor: Visitor) -> Any: ...

    @abstractmethod
    def deserialize_string(self, visitor: Visitor) -> Any: ...

    @abstractmethod
    def deserialize_option(self, visitor: Visitor) -> Any: ...

    @abstractmethod
    def deserialize_identifier(self, visitor: Visitor) -> Any: ...

    @abstractmethod
    def deserialize_seq(self, visitor: Visitor) -> Any: ...

    @abstractmethod
    def deserialize_struct(self, name: str, fields: Sequence[str], visitor: Visitor) -> Any: ...

    @abstractmethod
    def deserialize_ignored_any(self, visitor: Visitor) -> Any: ...

    @abstractmethod
    def deserialize_any(self, visitor: Visitor) -> Any: ...

    @abstractmethod
    def deserialize_map(self, visitor: Visitor) -> Any: ...

    @abstractmethod
    def deserialize_enum(self, name: str, variants: Sequence[str], visitor: Visitor) -> Any: ...

    @abstractmethod
    def deserialize_tuple(self, length: int, visitor: Visitor) -> Any: ...

    @abstractmethod
    def deserialize_bytes(self, visitor: Visitor) -> Any: ...

    @abstractmethod
    def deserialize_unit(self, visitor: Visitor) -> Any: ...
