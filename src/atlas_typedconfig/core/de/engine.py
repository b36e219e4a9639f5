# src/atlas_typedconfig/core/de/engine.py
"""
Engine de deserialização ligado ao cursor.

Este módulo implementa o `Deserializer` do protocolo sobre o documento
de configuração. Cada pedido de forma é respondido a partir do frame no
topo do cursor:

    - escalares (bool, números, char, strings) → `Cursor.read_scalar`
    - option     → sempre "presente"; ausência vem da iteração de campos
    - identifier → chave ligada ao ItemFrame corrente
    - seq        → accessor de elementos sobre o ItemFrame corrente
    - struct     → accessor de campos sobre o StructFrame corrente, ou
                   sobre um StructFrame empilhado a partir de um bloco
    - ignored    → sucesso sem consumir nada (chaves desconhecidas)
    - map, enum, tuple, bytes, unit, any → `UnsupportedShape`

Decisões arquiteturais:
    - Nenhuma árvore intermediária genérica é construída
    - A primeira falha aborta toda a chamada
    - A política de estreitamento numérico vem de `DecodeOptions`

Invariantes:
    - Um decode começa e termina com exatamente um frame (a raiz)
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Sequence

from ..config.options import DecodeOptions
from ..document.model import ConfigItem, ScalarKind, StrView
from ..document.scope import group_scope
from ..traceability.trace import DecodeTrace
from .access import FieldAccess, SeqElementAccess
from .cursor import Cursor, ItemFrame, SeqFrame, StructFrame
from .errors import (
    ExpectedKeyContextError,
    ExpectedStructContextError,
    InvalidCharLengthError,
    unsupported_shape,
)
from .numbers import Width, narrow
from .protocol import Deserializer, Seed, Visitor


class ConfigDeserializer(Deserializer):
    """
    `Deserializer` sobre uma sequência de `ConfigItem`.

    Uma instância atende exatamente uma chamada de decode: o cursor é
    criado no construtor, semeado com o escopo raiz do documento.
    """

    def __init__(
        self,
        items: Iterable[ConfigItem],
        options: Optional[DecodeOptions] = None,
        trace: Optional[DecodeTrace] = None,
    ) -> None:
        self.options = options or DecodeOptions()
        if trace is None and self.options.trace:
            trace = DecodeTrace()
        if trace is not None:
            trace.meta.setdefault("number_policy", self.options.number_policy.value)
        self.trace = trace
        self.cursor = Cursor(group_scope(items), trace=trace)

    # -----------------------------
    # Escalares
    # -----------------------------
    def deserialize_bool(self, visitor: Visitor) -> Any:
        return visitor.visit_bool(self.cursor.read_scalar(ScalarKind.BOOLEAN).value)

    def _number(self, width: Width, visitor: Visitor) -> Any:
        raw = self.cursor.read_scalar(ScalarKind.NUMBER).value
        value = narrow(raw, width, self.options.number_policy)
        if width.is_float:
            return visitor.visit_float(value)
        return visitor.visit_int(value)

    def deserialize_i8(self, visitor: Visitor) -> Any:
        return self._number(Width.I8, visitor)

    def deserialize_i16(self, visitor: Visitor) -> Any:
        return self._number(Width.I16, visitor)

    def deserialize_i32(self, visitor: Visitor) -> Any:
        return self._number(Width.I32, visitor)

    def deserialize_i64(self, visitor: Visitor) -> Any:
        return self._number(Width.I64, visitor)

    def deserialize_u8(self, visitor: Visitor) -> Any:
        return self._number(Width.U8, visitor)

    def deserialize_u16(self, visitor: Visitor) -> Any:
        return self._number(Width.U16, visitor)

    def deserialize_u32(self, visitor: Visitor) -> Any:
        return self._number(Width.U32, visitor)

    def deserialize_u64(self, visitor: Visitor) -> Any:
        return self._number(Width.U64, visitor)

    def deserialize_f32(self, visitor: Visitor) -> Any:
        return self._number(Width.F32, visitor)

    def deserialize_f64(self, visitor: Visitor) -> Any:
        return self._number(Width.F64, visitor)

    def deserialize_char(self, visitor: Visitor) -> Any:
        text = self.cursor.read_scalar(ScalarKind.STRING).value
        if len(text) != 1:
            raise InvalidCharLengthError(
                f"expected a single character, found {text!r}", value=text
            )
        return visitor.visit_char(text)

    def deserialize_str(self, visitor: Visitor) -> Any:
        text = self.cursor.read_scalar(ScalarKind.STRING).value
        return visitor.visit_borrowed_str(StrView(text))

    def deserialize_string(self, visitor: Visitor) -> Any:
        return visitor.visit_string(self.cursor.read_scalar(ScalarKind.STRING).value)

    # -----------------------------
    # Formas estruturais
    # -----------------------------
    def deserialize_option(self, visitor: Visitor) -> Any:
        return visitor.visit_some(self)

    def deserialize_identifier(self, visitor: Visitor) -> Any:
        return visitor.visit_borrowed_str(StrView(self.cursor.bound_key()))

    def deserialize_seq(self, visitor: Visitor) -> Any:
        top = self.cursor.current()
        if not isinstance(top, ItemFrame):
            raise ExpectedKeyContextError("expected key context", frame=top.label)
        return visitor.visit_seq(SeqElementAccess(self, len(top.elements())))

    def deserialize_struct(self, name: str, fields: Sequence[str], visitor: Visitor) -> Any:
        top = self.cursor.current()

        # origens (b) e (c) descem um nível e precisam subir ao final
        pushed = False
        if isinstance(top, StructFrame):
            frame = top
        elif isinstance(top, SeqFrame):
            frame = self.cursor.enter_sequence_element_as_struct()
            pushed = True
        elif isinstance(top, ItemFrame):
            frame = self.cursor.enter_item_as_struct()
            pushed = True
        else:
            raise ExpectedStructContextError("expected struct context", struct=name)

        value = visitor.visit_map(FieldAccess(self, len(frame.scope)))
        if pushed:
            self.cursor.ascend()
        return value

    def deserialize_ignored_any(self, visitor: Visitor) -> Any:
        return visitor.visit_none()

    # -----------------------------
    # Formas sem representação no documento
    # -----------------------------
    def deserialize_any(self, visitor: Visitor) -> Any:
        raise unsupported_shape("any")

    def deserialize_map(self, visitor: Visitor) -> Any:
        raise unsupported_shape("map")

    def deserialize_enum(self, name: str, variants: Sequence[str], visitor: Visitor) -> Any:
        raise unsupported_shape("enum")

    def deserialize_tuple(self, length: int, visitor: Visitor) -> Any:
        raise unsupported_shape("tuple")

    def deserialize_bytes(self, visitor: Visitor) -> Any:
        raise unsupported_shape("bytes")

    def deserialize_unit(self, visitor: Visitor) -> Any:
        raise unsupported_shape("unit")


def deserialize_items(
    items: Iterable[ConfigItem],
    seed: Seed,
    *,
    options: Optional[DecodeOptions] = None,
    trace: Optional[DecodeTrace] = None,
) -> Any:
    """
    Executa uma chamada de decode completa com `seed` na raiz.

    Args:
        items (Iterable[ConfigItem]): Documento de entrada.
        seed (Seed): Callable que decodifica o valor raiz.
        options (Optional[DecodeOptions]): Opções de decode.
        trace (Optional[DecodeTrace]): Coletor de eventos do cursor.

    Returns:
        Any: Valor produzido pelo seed.

    Raises:
        DeserializeError: Primeira falha encontrada na travessia.
        RuntimeError: Se a pilha não terminar com exatamente a raiz.
    """
    de = ConfigDeserializer(items, options=options, trace=trace)
    value = seed(de)
    if de.cursor.depth != 1:
        raise RuntimeError(
            f"cursor terminou com profundidade {de.cursor.depth}, esperado 1"
        )
    return value
