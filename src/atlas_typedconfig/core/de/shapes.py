# src/atlas_typedconfig/core/de/shapes.py
"""
Anotações de forma para campos de dataclasses.

Python possui um único `int` e um único `float`; larguras e o tipo
caractere são declarados via `typing.Annotated`:

    @dataclass
    class Plugin:
        port: U16
        ratio: F32
        separator: Char

`int` sem anotação equivale a I64 e `float` a F64.
"""

from __future__ import annotations

from typing import Annotated

from .numbers import Width


class CharMarker:
    """Marca uma `str` como caractere único."""

    def __repr__(self) -> str:
        return "CHAR"


CHAR = CharMarker()

I8 = Annotated[int, Width.I8]
I16 = Annotated[int, Width.I16]
I32 = Annotated[int, Width.I32]
I64 = Annotated[int, Width.I64]
U8 = Annotated[int, Width.U8]
U16 = Annotated[int, Width.U16]
U32 = Annotated[int, Width.U32]
U64 = Annotated[int, Width.U64]
F32 = Annotated[float, Width.F32]
F64 = Annotated[float, Width.F64]
Char = Annotated[str, CHAR]
