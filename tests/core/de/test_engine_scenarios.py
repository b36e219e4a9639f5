# tests/core/de/test_engine_scenarios.py
"""
Testes de decode completo: documento → dataclass.

Este módulo valida o comportamento observável do engine dirigido pela
forma do tipo de destino.

Os testes asseguram que:
- escalares simples são decodificados no campo correspondente
- campos Optional ausentes viram None e presentes viram o valor
- chaves repetidas viram sequências na ordem do documento
- blocos repetidos viram sequências de structs, independentes da
  ordem interna dos filhos
- chaves extras são ignoradas
- formas sem representação falham com `UnsupportedShape`

Invariantes:
    - Cada decode termina com o cursor na raiz
    - Nenhum valor parcial é retornado em caso de falha

Limites explícitos:
    - Não valida o estreitamento numérico em detalhe (ver test_numbers.py)
    - Não valida o trace (ver tests/core/traceability)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

import pytest

from atlas_typedconfig import (
    Char,
    ConfigItem,
    ConfigValue,
    DecodeTrace,
    F32,
    I8,
    I64,
    StrView,
    U16,
    U64,
    U8,
    from_items,
)
from atlas_typedconfig.core.de.errors import (
    CustomError,
    ErrorKind,
    ExpectedKeyContextError,
    ExpectedObjectChildrenError,
    ExpectedSingleValueError,
    InvalidCharLengthError,
    UnsupportedShapeError,
    WrongScalarKindError,
)


@dataclass
class BoolOnly:
    my_bool: bool


@dataclass
class OptionalBool:
    my_bool: Optional[bool]


@dataclass
class SmallInt:
    my_int: I8


@dataclass
class OwnedString:
    my_string: str


@dataclass
class BorrowedString:
    my_string: StrView


@dataclass
class BoolAndString:
    my_bool: bool
    my_string: str


@dataclass
class BoolList:
    my_bool: List[bool]


@dataclass
class MultipleLists:
    my_bool: List[bool]
    my_num: List[float]


@dataclass
class Options:
    my_bool: Optional[bool]
    my_string: Optional[str]


@dataclass
class CharOnly:
    my_char: Char


@dataclass
class MyPort:
    port: int


@dataclass
class Ports:
    ports: List[MyPort]


@dataclass
class MyAddress:
    port: int
    host: str


@dataclass
class Addresses:
    address: List[MyAddress]


@dataclass
class Server:
    address: MyAddress
    fallback: Optional[MyAddress] = None


@dataclass
class Renamed:
    port: U16 = field(metadata={"key": "Port"})
    ratio: F32 = 1.0
    tags: Sequence[str] = field(default_factory=list)


@dataclass
class WithMap:
    settings: Dict[str, str]


class Color(Enum):
    RED = "red"


@dataclass
class WithEnum:
    color: Color


@dataclass
class WithTuple:
    pair: Tuple[int, int]


@dataclass
class WithBytes:
    blob: bytes


@dataclass
class WithUnit:
    nothing: None


@dataclass
class Widths:
    small: U8
    unsigned: U64
    big: I64


@dataclass
class Nested:
    name: str
    children: List["Nested"] = field(default_factory=list)


# ---------------------------------------------------------------------
# Escalares
# ---------------------------------------------------------------------

def test_simple_bool(item):
    assert from_items([item("my_bool", True)], BoolOnly) == BoolOnly(my_bool=True)


def test_empty_document_optional_is_none():
    assert from_items([], OptionalBool) == OptionalBool(my_bool=None)


def test_optional_present_wraps_value(item):
    assert from_items([item("my_bool", False)], OptionalBool) == OptionalBool(my_bool=False)


def test_simple_number(item):
    assert from_items([item("my_int", 1)], SmallInt) == SmallInt(my_int=1)


def test_simple_string(item):
    out = from_items([item("my_string", "HEY")], OwnedString)
    assert out == OwnedString(my_string="HEY")


def test_borrowed_string_is_a_view_on_the_document():
    text = "HEY"
    doc = [ConfigItem(key="my_string", values=(ConfigValue.string(text),))]

    out = from_items(doc, BorrowedString)

    assert isinstance(out.my_string, StrView)
    assert out.my_string.buffer is text
    assert (out.my_string.offset, out.my_string.length) == (0, 3)
    assert out.my_string == "HEY"


def test_multiple_fields(item):
    """
    Cenário canônico: `my_bool` e `my_string` no mesmo escopo.

    Invariantes:
        - cada campo recebe o escalar da sua própria chave
    """
    doc = [item("my_bool", True), item("my_string", "/")]
    out = from_items(doc, BoolAndString)
    assert out == BoolAndString(my_bool=True, my_string="/")


def test_options_mixed_presence(item):
    out = from_items([item("my_bool", True)], Options)
    assert out == Options(my_bool=True, my_string=None)


def test_char(item):
    assert from_items([item("my_char", "/")], CharOnly) == CharOnly(my_char="/")


@pytest.mark.parametrize("text", ["", "ab", "//"])
def test_char_requires_exactly_one_character(item, text):
    with pytest.raises(InvalidCharLengthError):
        from_items([item("my_char", text)], CharOnly)


def test_wrong_scalar_kind(item):
    with pytest.raises(WrongScalarKindError):
        from_items([item("my_bool", "yes")], BoolOnly)


def test_scalar_field_with_two_values_fails(item):
    with pytest.raises(ExpectedSingleValueError):
        from_items([item("my_bool", True), item("my_bool", False)], BoolOnly)


def test_missing_required_field(item):
    with pytest.raises(CustomError) as exc:
        from_items([item("other", 1)], BoolOnly)
    assert exc.value.kind is ErrorKind.CUSTOM
    assert "missing field `my_bool`" in str(exc.value)


# ---------------------------------------------------------------------
# Sequências
# ---------------------------------------------------------------------

def test_vec_from_single_occurrence_values(item):
    out = from_items([item("my_bool", True, False)], BoolList)
    assert out == BoolList(my_bool=[True, False])


def test_vec_from_repeated_occurrences(item):
    out = from_items([item("my_bool", True), item("my_bool", False)], BoolList)
    assert out == BoolList(my_bool=[True, False])


@pytest.mark.parametrize("n", [0, 1, 4])
def test_vec_length_matches_occurrences(item, n):
    doc = [item("my_bool", i % 2 == 0) for i in range(n)]
    out = from_items(doc, BoolList)
    assert out.my_bool == [i % 2 == 0 for i in range(n)]


def test_multiple_vecs(item):
    doc = [
        item("my_bool", True),
        item("my_bool", False),
        item("my_num", 10.0, 12.0),
    ]
    out = from_items(doc, MultipleLists)
    assert out == MultipleLists(my_bool=[True, False], my_num=[10.0, 12.0])


def test_reordering_occurrences_reorders_sequence(item):
    doc = [item("my_bool", False), item("my_bool", True)]
    assert from_items(doc, BoolList).my_bool == [False, True]


def test_reordering_distinct_keys_keeps_values(item):
    a = from_items([item("my_bool", True), item("my_string", "/")], BoolAndString)
    b = from_items([item("my_string", "/"), item("my_bool", True)], BoolAndString)
    assert a == b


def test_interleaved_keys_group_per_key(item):
    doc = [item("my_bool", True), item("my_num", 1), item("my_bool", False)]
    out = from_items(doc, MultipleLists)
    assert out == MultipleLists(my_bool=[True, False], my_num=[1.0])


# ---------------------------------------------------------------------
# Blocos aninhados
# ---------------------------------------------------------------------

def test_nested(item):
    doc = [
        item("ports", children=[item("port", 2003)]),
        item("ports", children=[item("port", 2004)]),
    ]
    out = from_items(doc, Ports)
    assert out == Ports(ports=[MyPort(port=2003), MyPort(port=2004)])


def test_nested_multiple(address_document):
    """
    Blocos repetidos com filhos em ordens diferentes.

    Invariantes:
        - a sequência segue a ordem das ocorrências
        - a ordem interna dos filhos não altera os campos
    """
    trace = DecodeTrace()
    out = from_items(address_document, Addresses, trace=trace)

    assert out == Addresses(
        address=[
            MyAddress(host="localhost", port=2003),
            MyAddress(host="127.0.0.1", port=2004),
        ]
    )
    assert trace.events[-1]["depth"] == 1


def test_sequence_of_structs_requires_children(item):
    with pytest.raises(ExpectedObjectChildrenError):
        from_items([item("ports", 2003)], Ports)


def test_sequence_mixing_scalars_and_blocks(item):
    doc = [item("ports", 2003), item("ports", children=[item("port", 2004)])]
    with pytest.raises(UnsupportedShapeError):
        from_items(doc, Ports)


def test_single_block_into_struct_field(item):
    doc = [
        item("address", children=[item("host", "h"), item("port", 1)]),
    ]
    out = from_items(doc, Server)
    assert out == Server(address=MyAddress(port=1, host="h"), fallback=None)


def test_optional_block_present(item):
    doc = [
        item("fallback", children=[item("port", 2), item("host", "f")]),
        item("address", children=[item("port", 1), item("host", "h")]),
    ]
    out = from_items(doc, Server)
    assert out.fallback == MyAddress(port=2, host="f")
    assert out.address == MyAddress(port=1, host="h")


def test_recursive_blocks(item):
    doc = [
        item("name", "root"),
        item(
            "children",
            children=[
                item("name", "a"),
                item("children", children=[item("name", "a1")]),
            ],
        ),
        item("children", children=[item("name", "b")]),
    ]
    out = from_items(doc, Nested)
    assert out == Nested(
        name="root",
        children=[
            Nested(name="a", children=[Nested(name="a1")]),
            Nested(name="b"),
        ],
    )


def test_renamed_key_defaults_and_widths(item):
    doc = [item("Port", 70000), item("tags", "x", "y")]
    out = from_items(doc, Renamed)
    # 70000 não cabe em u16: satura no máximo
    assert out == Renamed(port=65535, ratio=1.0, tags=["x", "y"])


def test_out_of_range_numbers_saturate_by_default(item):
    doc = [item("small", 300.0), item("unsigned", -1.0), item("big", 1e19)]
    out = from_items(doc, Widths)
    assert out == Widths(small=255, unsigned=0, big=2 ** 63 - 1)


def test_nested_sequence_inside_sequence_fails(item):
    @dataclass
    class _Grid:
        rows: List[List[int]]

    with pytest.raises(ExpectedKeyContextError):
        from_items([item("rows", 1, 2)], _Grid)


# ---------------------------------------------------------------------
# Tolerância e rejeição
# ---------------------------------------------------------------------

def test_extra_keys_are_ignored(item):
    doc = [item("my_char", "/"), item("my_boat", "/")]
    assert from_items(doc, CharOnly) == CharOnly(my_char="/")


def test_extra_block_keys_are_ignored(item):
    doc = [
        item("unknown", children=[item("deep", children=[item("x", 1)])]),
        item("my_bool", True),
    ]
    assert from_items(doc, BoolOnly) == BoolOnly(my_bool=True)


@pytest.mark.parametrize("target", [WithMap, WithEnum, WithTuple, WithBytes, WithUnit])
def test_unsupported_shapes(item, target):
    doc = [item(name, "x") for name in ("settings", "color", "pair", "blob", "nothing")]
    with pytest.raises(UnsupportedShapeError) as exc:
        from_items(doc, target)
    assert exc.value.payload.type == "UnsupportedShape"


@pytest.mark.parametrize(
    "target,shape",
    [
        (dict, "map"),
        (Dict[str, int], "map"),
        (Tuple[int, int], "tuple"),
        (Color, "enum"),
        (type(None), "unit"),
        (None, "unit"),
    ],
)
def test_unsupported_shapes_at_root(target, shape):
    with pytest.raises(UnsupportedShapeError) as exc:
        from_items([], target)
    assert exc.value.details["shape"] == shape
