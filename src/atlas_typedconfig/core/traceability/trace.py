# src/atlas_typedconfig/core/traceability/trace.py
"""
Trace estruturado de uma chamada de decode.

Este módulo define o `DecodeTrace`, o registro de eventos estruturados
produzido pelo cursor durante uma deserialização. Cada operação sobre a
pilha de frames (push, replace, pop) gera exatamente um evento.

Princípios fundamentais:
    - Logs são eventos estruturados, não strings livres
    - Cada trace pertence a uma única chamada de decode
    - Nenhum estado global é compartilhado

Invariantes:
    - Todo evento contém `op`, `frame`, `depth` e `timestamp`
    - A coleção de eventos cresce de forma incremental e ordenada

Limites explícitos:
    - Não persiste eventos
    - Não decide políticas de decode
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List


@dataclass
class DecodeTrace:
    """
    Coletor de eventos de uma chamada de decode.

    Campos:
        - meta: metadados livres associados ao trace (ex.: tipo de destino)
        - events: eventos registrados, na ordem em que ocorreram
    """

    meta: Dict[str, Any] = field(default_factory=dict)
    events: List[Dict[str, Any]] = field(default_factory=list, init=False)

    def log(self, *, op: str, frame: str, depth: int, **extra: Any) -> None:
        event = {
            "op": op,
            "frame": frame,
            "depth": depth,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def ops(self) -> List[str]:
        """Sequência compacta `op:frame`, útil em asserts de teste."""
        return [f"{e['op']}:{e['frame']}" for e in self.events]

    def max_depth(self) -> int:
        return max((e["depth"] for e in self.events), default=0)
