# src/atlas_typedconfig/core/config/options.py
"""
Opções de decode do Atlas TypedConfig.

`DecodeOptions` reúne as escolhas de política que não pertencem nem ao
documento nem ao tipo de destino:

    - number_policy → estreitamento de float64 para larguras menores
                      (`saturate` padrão, `truncate`, `checked`)
    - trace         → registra eventos do cursor em um `DecodeTrace`

Esta implementação evita dependências externas (ex.: Pydantic) para
manter o core leve; a validação segue o mesmo estilo explícito dos
demais schemas do projeto.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from ..de.numbers import NumberPolicy
from .errors import InvalidOptionsError


_ALLOWED_KEYS = {"number_policy", "trace"}
_ALLOWED_POLICIES = {p.value for p in NumberPolicy}


def _expect(cond: bool, msg: str) -> None:
    if not cond:
        raise InvalidOptionsError(msg)


@dataclass(frozen=True)
class DecodeOptions:
    """Opções imutáveis de uma chamada de decode."""

    number_policy: NumberPolicy = NumberPolicy.SATURATE
    trace: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {"number_policy": self.number_policy.value, "trace": self.trace}


def options_from_dict(data: Any) -> DecodeOptions:
    """Valida e materializa `DecodeOptions` a partir de um mapa."""
    if data is None:
        return DecodeOptions()

    _expect(isinstance(data, dict), "options must be a mapping/dict")

    unknown = set(data) - _ALLOWED_KEYS
    _expect(not unknown, f"unknown options: {sorted(unknown)}")

    policy = data.get("number_policy", NumberPolicy.SATURATE)
    if isinstance(policy, NumberPolicy):
        policy = policy.value
    _expect(isinstance(policy, str), "number_policy must be a string")
    policy = policy.strip().lower()
    _expect(
        policy in _ALLOWED_POLICIES,
        f"number_policy must be one of {sorted(_ALLOWED_POLICIES)}",
    )

    trace = data.get("trace", False)
    _expect(isinstance(trace, bool), "trace must be boolean")

    return DecodeOptions(number_policy=NumberPolicy(policy), trace=trace)
