# src/atlas_typedconfig/core/de/derive.py
"""
Driver dirigido por type hints: dataclasses → pedidos ao protocolo.

Este módulo faz o papel do framework genérico de deserialização: a partir
do tipo de destino ele decide qual forma pedir ao `Deserializer` e qual
`Visitor` entregar. O engine nunca inspeciona tipos Python; ele apenas
responde aos pedidos.

Mapeamento de tipos (v1):
    - bool, str, int (I64), float (F64), StrView
    - larguras e Char via `typing.Annotated` (ver `shapes.py`)
    - Optional[T] / T | None
    - List[T] / list[T] / Sequence[T]
    - dataclasses (campos casados por nome, na ordem do documento)
    - tipos com classmethod `__deserialize__(cls, deserializer)`
    - dict, Enum sem hook, tuple, bytes, None, Any → formas não suportadas

Campos de dataclass:
    - chaves desconhecidas são ignoradas via `deserialize_ignored_any`
    - campos ausentes: Optional → None; sequência → []; com default →
      default; demais → erro `missing field`
    - `field(metadata={"key": "Port"})` liga o campo a outra chave
"""

from __future__ import annotations

import collections.abc
import dataclasses
from enum import Enum
from functools import lru_cache
from typing import (
    Annotated,
    Any,
    Dict,
    Iterable,
    List,
    Optional,
    Tuple,
    Type,
    TypeVar,
    Union,
    get_args,
    get_origin,
    get_type_hints,
)

from ..config.options import DecodeOptions
from ..document.model import ConfigItem, StrView
from ..traceability.trace import DecodeTrace
from .engine import deserialize_items
from .errors import missing_field
from .numbers import Width
from .protocol import Deserializer, MapAccess, Seed, SeqAccess, Visitor
from .shapes import CharMarker

try:
    from types import UnionType
except ImportError:  # Python < 3.10 não possui `X | Y` em runtime
    UnionType = None


T = TypeVar("T")

_SEQUENCE_ORIGINS = {list, collections.abc.Sequence, collections.abc.Iterable}
_MAP_ORIGINS = {dict, collections.abc.Mapping, collections.abc.MutableMapping}
_TUPLE_ORIGINS = {tuple}


# ---------------------------------------------------------------------------
# Visitors primitivos
# ---------------------------------------------------------------------------

class _BoolVisitor(Visitor):
    expecting = "a boolean"

    def visit_bool(self, value: bool) -> bool:
        return value


class _IntVisitor(Visitor):
    expecting = "an integer"

    def visit_int(self, value: int) -> int:
        return value


class _FloatVisitor(Visitor):
    expecting = "a float"

    def visit_float(self, value: float) -> float:
        return value

    def visit_int(self, value: int) -> float:
        return float(value)


class _StringVisitor(Visitor):
    expecting = "a string"

    def visit_string(self, value: str) -> str:
        return value


class _StrViewVisitor(Visitor):
    expecting = "a borrowed string"

    def visit_borrowed_str(self, value: StrView) -> StrView:
        return value

    def visit_string(self, value: str) -> StrView:
        return StrView(value)


class _CharVisitor(Visitor):
    expecting = "a character"

    def visit_char(self, value: str) -> str:
        return value


class _IdentifierVisitor(Visitor):
    expecting = "a field identifier"

    def visit_string(self, value: str) -> str:
        return value


class _IgnoredVisitor(Visitor):
    expecting = "anything"

    def visit_none(self) -> None:
        return None


class _RejectVisitor(Visitor):
    def __init__(self, expecting: str) -> None:
        self.expecting = expecting


# ---------------------------------------------------------------------------
# Visitors compostos
# ---------------------------------------------------------------------------

class _OptionVisitor(Visitor):
    expecting = "an option"

    def __init__(self, inner: Seed) -> None:
        self.inner = inner

    def visit_none(self) -> None:
        return None

    def visit_some(self, deserializer: Deserializer) -> Any:
        return self.inner(deserializer)


class _ListVisitor(Visitor):
    expecting = "a sequence"

    def __init__(self, inner: Seed) -> None:
        self.inner = inner

    def visit_seq(self, seq: SeqAccess) -> List[Any]:
        out: List[Any] = []
        while True:
            has_next, value = seq.next_element(self.inner)
            if not has_next:
                return out
            out.append(value)


@dataclasses.dataclass(frozen=True)
class _FieldPlan:
    name: str
    key: str
    seed: Seed
    optional: bool
    sequence: bool
    has_default: bool


def _identifier(de: Deserializer) -> str:
    return de.deserialize_identifier(_IdentifierVisitor())


def _ignored(de: Deserializer) -> None:
    return de.deserialize_ignored_any(_IgnoredVisitor())


class _StructVisitor(Visitor):
    def __init__(self, cls: type, plans: Tuple[_FieldPlan, ...]) -> None:
        self.cls = cls
        self.plans = plans
        self.by_key = {p.key: p for p in plans}
        self.expecting = f"struct {cls.__name__}"

    def visit_map(self, fields: MapAccess) -> Any:
        values: Dict[str, Any] = {}

        while True:
            key = fields.next_key(_identifier)
            if key is None:
                break
            plan = self.by_key.get(key)
            if plan is None:
                fields.next_value(_ignored)
                continue
            values[plan.name] = fields.next_value(plan.seed)

        for plan in self.plans:
            if plan.name in values or plan.has_default:
                continue
            if plan.optional:
                values[plan.name] = None
                continue
            if plan.sequence:
                # chave presente zero vezes: sequência vazia
                values[plan.name] = []
                continue
            raise missing_field(plan.key, struct=self.cls.__name__)

        return self.cls(**values)


# ---------------------------------------------------------------------------
# Planejamento por tipo
# ---------------------------------------------------------------------------

def _is_union(origin: Any) -> bool:
    return origin is Union or (UnionType is not None and origin is UnionType)


def _is_optional(tp: Any) -> bool:
    return _is_union(get_origin(tp)) and type(None) in get_args(tp)


def _is_sequence(tp: Any) -> bool:
    if get_origin(tp) is Annotated:
        tp = get_args(tp)[0]
    return get_origin(tp) in _SEQUENCE_ORIGINS or tp in (list, List)


_WIDTH_REQUESTS = {
    Width.I8: "deserialize_i8",
    Width.I16: "deserialize_i16",
    Width.I32: "deserialize_i32",
    Width.I64: "deserialize_i64",
    Width.U8: "deserialize_u8",
    Width.U16: "deserialize_u16",
    Width.U32: "deserialize_u32",
    Width.U64: "deserialize_u64",
    Width.F32: "deserialize_f32",
    Width.F64: "deserialize_f64",
}


def _number_seed(width: Width) -> Seed:
    method = _WIDTH_REQUESTS[width]
    visitor = _FloatVisitor() if width.is_float else _IntVisitor()
    return lambda de: getattr(de, method)(visitor)


@lru_cache(maxsize=None)
def _struct_plans(cls: type) -> Tuple[_FieldPlan, ...]:
    hints = get_type_hints(cls, include_extras=True)
    plans = []
    for f in dataclasses.fields(cls):
        if not f.init:
            continue
        tp = hints[f.name]
        has_default = (
            f.default is not dataclasses.MISSING
            or f.default_factory is not dataclasses.MISSING
        )
        plans.append(
            _FieldPlan(
                name=f.name,
                key=f.metadata.get("key", f.name),
                seed=seed_for(tp),
                optional=_is_optional(tp),
                sequence=_is_sequence(tp),
                has_default=has_default,
            )
        )
    return tuple(plans)


def _struct_seed(cls: type) -> Seed:
    def seed(de: Deserializer) -> Any:
        plans = _struct_plans(cls)
        return de.deserialize_struct(
            cls.__name__, [p.key for p in plans], _StructVisitor(cls, plans)
        )
    return seed


def seed_for(tp: Any) -> Seed:
    """
    Constrói o seed que decodifica um valor do tipo `tp`.

    Args:
        tp (Any): Tipo de destino (type hint).

    Returns:
        Seed: Callable `(Deserializer) -> valor`.
    """
    origin = get_origin(tp)

    if origin is Annotated:
        base, *meta = get_args(tp)
        for m in meta:
            if isinstance(m, Width):
                return _number_seed(m)
            if isinstance(m, CharMarker):
                return lambda de: de.deserialize_char(_CharVisitor())
        return seed_for(base)

    if tp is bool:
        return lambda de: de.deserialize_bool(_BoolVisitor())
    if tp is int:
        return _number_seed(Width.I64)
    if tp is float:
        return _number_seed(Width.F64)
    if tp is str:
        return lambda de: de.deserialize_string(_StringVisitor())
    if tp is StrView:
        return lambda de: de.deserialize_str(_StrViewVisitor())

    hook = getattr(tp, "__deserialize__", None)
    if hook is not None:
        return lambda de: hook(de)

    if _is_union(origin):
        args = [a for a in get_args(tp) if a is not type(None)]
        if _is_optional(tp) and len(args) == 1:
            inner = seed_for(args[0])
            return lambda de: de.deserialize_option(_OptionVisitor(inner))
        return lambda de: de.deserialize_any(_RejectVisitor("a union"))

    if origin in _SEQUENCE_ORIGINS or tp in (list, List):
        args = get_args(tp)
        inner = seed_for(args[0]) if args else seed_for(Any)
        return lambda de: de.deserialize_seq(_ListVisitor(inner))

    if dataclasses.is_dataclass(tp) and isinstance(tp, type):
        return _struct_seed(tp)

    if origin in _MAP_ORIGINS or tp in (dict, Dict):
        return lambda de: de.deserialize_map(_RejectVisitor("a map"))
    if isinstance(tp, type) and issubclass(tp, Enum):
        variants = [m.name for m in tp]
        return lambda de: de.deserialize_enum(tp.__name__, variants, _RejectVisitor("an enum"))
    if origin in _TUPLE_ORIGINS or tp in (tuple, Tuple):
        length = len(get_args(tp))
        return lambda de: de.deserialize_tuple(length, _RejectVisitor("a tuple"))
    if tp in (bytes, bytearray):
        return lambda de: de.deserialize_bytes(_RejectVisitor("bytes"))
    if tp is None or tp is type(None):
        return lambda de: de.deserialize_unit(_RejectVisitor("unit"))

    return lambda de: de.deserialize_any(_RejectVisitor(repr(tp)))


def from_items(
    items: Iterable[ConfigItem],
    target: Type[T],
    *,
    options: Optional[DecodeOptions] = None,
    trace: Optional[DecodeTrace] = None,
) -> T:
    """
    Decodifica um documento de configuração em um valor do tipo `target`.

    Args:
        items (Iterable[ConfigItem]): Documento de entrada.
        target (Type[T]): Tipo de destino (em geral uma dataclass).
        options (Optional[DecodeOptions]): Política numérica e trace.
        trace (Optional[DecodeTrace]): Coletor de eventos do cursor.

    Returns:
        T: Valor totalmente decodificado.

    Raises:
        DeserializeError: Primeira falha encontrada; nenhum valor parcial
            é retornado.
    """
    if trace is not None:
        trace.meta.setdefault("target", getattr(target, "__name__", repr(target)))
    return deserialize_items(items, seed_for(target), options=options, trace=trace)
