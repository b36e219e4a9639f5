# src/atlas_typedconfig/core/de/numbers.py
"""
Estreitamento numérico: float64 do documento → largura pedida.

O documento armazena todo número como float64. Quando o tipo de destino
pede uma largura menor (inteira ou f32), o valor é estreitado segundo
uma `NumberPolicy`:

    - SATURATE (padrão): fração descartada em direção a zero, valor
      limitado aos extremos da largura. NaN vira 0.
    - TRUNCATE: fração descartada e excedente de faixa dando a volta
      (complemento de dois). NaN e infinitos viram 0.
    - CHECKED: fração descartada; valores fora da faixa (ou não finitos)
      levantam `NumberOutOfRangeError`.

Para F32 o arredondamento é ao mais próximo em precisão simples, como
no IEEE 754: só o que arredonda além do máximo finito está fora da
faixa. Esse excedente vira infinito com sinal (SATURATE, TRUNCATE) ou
erro (CHECKED).
"""

from __future__ import annotations

import math
import struct
from enum import Enum
from typing import Union

from .errors import NumberOutOfRangeError


class NumberPolicy(str, Enum):
    TRUNCATE = "truncate"
    SATURATE = "saturate"
    CHECKED = "checked"


class Width(str, Enum):
    """Larguras numéricas que o protocolo sabe pedir."""

    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    F32 = "f32"
    F64 = "f64"

    @property
    def is_float(self) -> bool:
        return self in (Width.F32, Width.F64)

    @property
    def bits(self) -> int:
        return int(self.value[1:])

    @property
    def signed(self) -> bool:
        return self.value.startswith("i")

    @property
    def bounds(self):
        if self.signed:
            return -(1 << (self.bits - 1)), (1 << (self.bits - 1)) - 1
        return 0, (1 << self.bits) - 1


# ponto médio entre o máximo finito do f32 e 2**128: daqui em diante arredonda para inf
_F32_OVERFLOW = 2.0 ** 128 - 2.0 ** 103


def _wrap(value: int, width: Width) -> int:
    mask = (1 << width.bits) - 1
    wrapped = value & mask
    if width.signed and wrapped >= 1 << (width.bits - 1):
        wrapped -= 1 << width.bits
    return wrapped


def _to_f32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _narrow_f32(value: float, policy: NumberPolicy) -> float:
    if math.isnan(value) or abs(value) < _F32_OVERFLOW:
        return _to_f32(value)

    if policy is NumberPolicy.CHECKED:
        raise NumberOutOfRangeError(
            f"{value} out of range for f32", value=value, width=Width.F32.value
        )
    return math.copysign(math.inf, value)


def narrow(value: float, width: Width, policy: NumberPolicy = NumberPolicy.SATURATE) -> Union[int, float]:
    """
    Estreita um float64 para `width` segundo `policy`.

    Args:
        value (float): Número lido do documento.
        width (Width): Largura pedida pelo tipo de destino.
        policy (NumberPolicy): Política de estreitamento.

    Returns:
        int | float: `int` para larguras inteiras, `float` para F32/F64.

    Raises:
        NumberOutOfRangeError: Apenas sob `NumberPolicy.CHECKED`.
    """
    if width is Width.F64:
        return float(value)
    if width is Width.F32:
        return _narrow_f32(value, policy)

    lo, hi = width.bounds

    if not math.isfinite(value):
        if policy is NumberPolicy.CHECKED:
            raise NumberOutOfRangeError(
                f"{value} out of range for {width.value}", value=value, width=width.value
            )
        if policy is NumberPolicy.SATURATE and math.isinf(value):
            return hi if value > 0 else lo
        return 0

    integral = math.trunc(value)

    if lo <= integral <= hi:
        return integral

    if policy is NumberPolicy.CHECKED:
        raise NumberOutOfRangeError(
            f"{value} out of range for {width.value}", value=value, width=width.value
        )
    if policy is NumberPolicy.SATURATE:
        return hi if integral > hi else lo
    return _wrap(integral, width)
