# src/atlas_typedconfig/core/document/scope.py
"""
Agrupamento de escopo: visão por chave de um nível do documento.

Um escopo é o conjunto de itens pertencentes diretamente a um nível
(o topo do documento ou a lista de filhos de um item). Este módulo
converte essa lista plana em uma sequência ordenada de chaves únicas,
cada uma associada à lista ordenada de suas ocorrências.

Política de agrupamento (v1):
    - Chaves aparecem na ordem da primeira ocorrência
    - Ocorrências repetidas mantêm a ordem do documento
    - Duas ocorrências da mesma chave nunca são mescladas

Limites explícitos:
    - Agrupa apenas um nível; filhos são agrupados sob demanda
    - Não interpreta valores
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from .model import ConfigItem, ConfigValue


@dataclass(frozen=True)
class Occurrence:
    """Uma aparição de uma chave dentro de um escopo."""

    values: Tuple[ConfigValue, ...]
    children: Tuple[ConfigItem, ...]

    @property
    def has_children(self) -> bool:
        return bool(self.children)


@dataclass(frozen=True)
class ScopeEntry:
    key: str
    occurrences: Tuple[Occurrence, ...]


@dataclass(frozen=True)
class Scope:
    """
    Visão agrupada e ordenada de um nível do documento.

    O acesso é posicional (`scope[i]`); a ordem das entradas é a ordem
    de primeira aparição de cada chave.
    """

    entries: Tuple[ScopeEntry, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, index: int) -> ScopeEntry:
        return self.entries[index]

    @property
    def keys(self) -> List[str]:
        return [e.key for e in self.entries]


def group_scope(items: Iterable[ConfigItem]) -> Scope:
    """
    Agrupa uma lista ordenada de itens em um `Scope`.

    Args:
        items (Iterable[ConfigItem]): Itens de um único nível.

    Returns:
        Scope: Chaves únicas na ordem de primeira aparição, cada uma com
        suas ocorrências na ordem do documento.
    """
    grouped: Dict[str, List[Occurrence]] = {}

    # dict preserva ordem de inserção -> ordem de primeira aparição
    for item in items:
        grouped.setdefault(item.key, []).append(
            Occurrence(values=tuple(item.values), children=tuple(item.children))
        )

    return Scope(
        entries=tuple(
            ScopeEntry(key=key, occurrences=tuple(occs))
            for key, occs in grouped.items()
        )
    )
