# src/atlas_typedconfig/core/document/model.py
"""
Modelo canônico do documento de configuração.

Este módulo define as estruturas de dados consumidas pelo engine de
deserialização: um documento é uma sequência ordenada de `ConfigItem`,
onde cada item possui uma chave, uma lista ordenada de valores escalares
e uma lista ordenada de filhos (blocos aninhados).

Princípios fundamentais:
    - O documento é imutável durante toda a deserialização
    - A ordem original dos itens é preservada
    - Chaves podem se repetir no mesmo nível

Componentes principais:
    - ScalarKind  → enum dos tipos escalares suportados
    - ConfigValue → escalar tipado (String, Number, Boolean)
    - ConfigItem  → item chave/valores/filhos
    - StrView     → visão emprestada (buffer, offset, length) sobre uma string

Limites explícitos:
    - Não realiza parsing de texto
    - Não agrupa chaves (ver `scope.py`)
    - Não conhece tipos de destino
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple, Union


class ScalarKind(str, Enum):
    """
    Tipos escalares representáveis no documento.

    Os valores são strings para facilitar serialização em payloads
    de erro e eventos de trace.
    """
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"


@dataclass(frozen=True)
class ConfigValue:
    """
    Escalar tipado de um item de configuração.

    O campo `kind` é a tag do valor; `value` carrega o dado Python
    correspondente (`str`, `float` ou `bool`). Use os construtores
    `string`, `number` e `boolean` em vez de montar a tag manualmente.
    """

    kind: ScalarKind
    value: Union[str, float, bool]

    @classmethod
    def string(cls, value: str) -> "ConfigValue":
        return cls(ScalarKind.STRING, value)

    @classmethod
    def number(cls, value: float) -> "ConfigValue":
        return cls(ScalarKind.NUMBER, float(value))

    @classmethod
    def boolean(cls, value: bool) -> "ConfigValue":
        return cls(ScalarKind.BOOLEAN, bool(value))


@dataclass(frozen=True)
class ConfigItem:
    """
    Item do documento: chave, valores escalares e filhos.

    Invariantes:
        - `values` e `children` são tuplas (imutáveis), na ordem do documento
        - Um item pode ter valores, filhos, ambos ou nenhum
    """

    key: str
    values: Tuple[ConfigValue, ...] = ()
    children: Tuple["ConfigItem", ...] = ()

    def __post_init__(self) -> None:
        # aceita listas na construção, mas armazena tuplas
        object.__setattr__(self, "values", tuple(self.values))
        object.__setattr__(self, "children", tuple(self.children))


@dataclass(frozen=True)
class StrView:
    """
    Visão emprestada sobre uma string do documento.

    A visão referencia o buffer original (a própria string do
    `ConfigValue`) com offset e comprimento explícitos, sem copiar.
    A materialização só ocorre via `str(view)`.
    """

    buffer: str = field(repr=False)
    offset: int = 0
    length: int = -1

    def __post_init__(self) -> None:
        if self.length < 0:
            object.__setattr__(self, "length", len(self.buffer) - self.offset)

    def __str__(self) -> str:
        if self.offset == 0 and self.length == len(self.buffer):
            return self.buffer
        return self.buffer[self.offset:self.offset + self.length]

    def __len__(self) -> int:
        return self.length

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StrView):
            return str(self) == str(other)
        if isinstance(other, str):
            return str(self) == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(str(self))
