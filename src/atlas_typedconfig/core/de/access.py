# src/atlas_typedconfig/core/de/access.py
"""
Accessors de campos e de sequências.

Adaptadores finos sobre (cursor, count, position) que implementam os
contratos `MapAccess` e `SeqAccess` do protocolo. A cada passo bem
sucedido a posição avança; quando a posição alcança `count` o accessor
sinaliza esgotamento exatamente uma vez e, se algum frame foi empilhado
(count > 0), ascende o cursor.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from .protocol import MapAccess, SeqAccess, Seed

if TYPE_CHECKING:
    from .engine import ConfigDeserializer


class FieldAccess(MapAccess):
    """Itera os campos de um StructFrame na ordem do escopo."""

    def __init__(self, de: "ConfigDeserializer", count: int) -> None:
        self.de = de
        self.count = count
        self.position = 0
        self.exhausted = False

    def next_key(self, seed: Seed) -> Optional[Any]:
        if self.position == self.count:
            if not self.exhausted:
                self.exhausted = True
                if self.count != 0:
                    self.de.cursor.ascend()
            return None

        self.de.cursor.descend_into_field(self.position)
        self.position += 1
        return seed(self.de)

    def next_value(self, seed: Seed) -> Any:
        return seed(self.de)


class SeqElementAccess(SeqAccess):
    """Itera os elementos da sequência ligada ao ItemFrame corrente."""

    def __init__(self, de: "ConfigDeserializer", count: int) -> None:
        self.de = de
        self.count = count
        self.position = 0
        self.exhausted = False

    def next_element(self, seed: Seed) -> tuple:
        if self.position == self.count:
            if not self.exhausted:
                self.exhausted = True
                if self.count != 0:
                    self.de.cursor.ascend()
            return False, None

        self.de.cursor.descend_into_sequence(self.position)
        self.position += 1
        return True, seed(self.de)

    def size_hint(self) -> Optional[int]:
        return self.count - self.position
