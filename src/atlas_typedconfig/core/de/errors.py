# src/atlas_typedconfig/core/de/errors.py
"""
Atlas TypedConfig — Estruturas canônicas de erro da deserialização (v1)

Este módulo define a taxonomia fechada de falhas do engine de
deserialização. Cada tipo de falha possui:

- um código estável (`ErrorKind`)
- uma subclasse de `DeserializeError`
- um payload serializável (`DeserializeErrorPayload`)

Todas as falhas são terminais para a chamada de decode: não existe
recuperação local nem retry, pois decodificar um documento fixo contra
um tipo fixo é determinístico.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    """Catálogo canônico de tipos de erro (v1)."""

    NO_FRAMES_LEFT = "NoFramesLeft"
    EXPECTED_SINGLE_VALUE = "ExpectedSingleValue"
    WRONG_SCALAR_KIND = "WrongScalarKind"
    EXPECTED_KEY_CONTEXT = "ExpectedKeyContext"
    EXPECTED_STRUCT_CONTEXT = "ExpectedStructContext"
    EXPECTED_OBJECT_CHILDREN = "ExpectedObjectChildren"
    INVALID_CHAR_LENGTH = "InvalidCharLength"
    UNSUPPORTED_SHAPE = "UnsupportedShape"
    NUMBER_OUT_OF_RANGE = "NumberOutOfRange"
    CUSTOM = "Custom"


_HINTS: Dict[ErrorKind, Optional[str]] = {
    ErrorKind.NO_FRAMES_LEFT: "O protocolo de decode pediu um valor sem frame ativo; revise o tipo de destino.",
    ErrorKind.EXPECTED_SINGLE_VALUE: "Declare o campo como sequência ou deixe exatamente um valor na chave.",
    ErrorKind.WRONG_SCALAR_KIND: "Ajuste o tipo do campo ou o valor no documento.",
    ErrorKind.EXPECTED_KEY_CONTEXT: "O pedido só é válido sobre um campo ligado a uma chave.",
    ErrorKind.EXPECTED_STRUCT_CONTEXT: "Structs só podem ser lidas do escopo atual ou de blocos aninhados.",
    ErrorKind.EXPECTED_OBJECT_CHILDREN: "A chave precisa de um bloco de filhos para virar struct.",
    ErrorKind.INVALID_CHAR_LENGTH: "Use uma string de exatamente um caractere.",
    ErrorKind.UNSUPPORTED_SHAPE: "Mapas, enums, tuplas, bytes e unit não têm representação no documento.",
    ErrorKind.NUMBER_OUT_OF_RANGE: "Use uma largura numérica maior ou outra NumberPolicy.",
    ErrorKind.CUSTOM: None,
}


@dataclass(frozen=True)
class DeserializeErrorPayload:
    """
    Payload canônico de erro de deserialização.

    Campos:
    - type: código estável do erro (valor de `ErrorKind`)
    - message: mensagem curta e objetiva
    - details: dados estruturados para diagnóstico
    - hint: ação sugerida para corrigir documento ou tipo de destino
    """

    type: str
    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class DeserializeError(Exception):
    """
    Exceção base de todas as falhas do engine de deserialização.

    Subclasses fixam `kind`; instâncias carregam uma mensagem e
    detalhes estruturados, expostos via `payload`.
    """

    kind: ErrorKind = ErrorKind.CUSTOM

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    @property
    def payload(self) -> DeserializeErrorPayload:
        return DeserializeErrorPayload(
            type=self.kind.value,
            message=self.message,
            details=dict(self.details),
            hint=_HINTS.get(self.kind),
        )


class NoFramesLeftError(DeserializeError):
    """Pilha de frames vazia: violação do protocolo pelo driver, não erro de dados."""

    kind = ErrorKind.NO_FRAMES_LEFT


class ExpectedSingleValueError(DeserializeError):
    kind = ErrorKind.EXPECTED_SINGLE_VALUE


class WrongScalarKindError(DeserializeError):
    kind = ErrorKind.WRONG_SCALAR_KIND


class ExpectedKeyContextError(DeserializeError):
    kind = ErrorKind.EXPECTED_KEY_CONTEXT


class ExpectedStructContextError(DeserializeError):
    kind = ErrorKind.EXPECTED_STRUCT_CONTEXT


class ExpectedObjectChildrenError(DeserializeError):
    kind = ErrorKind.EXPECTED_OBJECT_CHILDREN


class InvalidCharLengthError(DeserializeError):
    kind = ErrorKind.INVALID_CHAR_LENGTH


class UnsupportedShapeError(DeserializeError):
    kind = ErrorKind.UNSUPPORTED_SHAPE


class NumberOutOfRangeError(DeserializeError):
    """Levantada apenas sob `NumberPolicy.CHECKED`."""

    kind = ErrorKind.NUMBER_OUT_OF_RANGE


class CustomError(DeserializeError):
    """
    Erro levantado pelo lado do protocolo (visitors, driver, hooks).

    Equivale ao erro "custom" de um framework genérico de
    deserialização: campo ausente, tipo inválido para o visitor,
    valor fora do domínio de um hook.
    """

    kind = ErrorKind.CUSTOM


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def missing_field(name: str, *, struct: Optional[str] = None) -> CustomError:
    return CustomError(f"missing field `{name}`", field=name, struct=struct)


def invalid_type(unexpected: str, expected: str) -> CustomError:
    return CustomError(
        f"invalid type: {unexpected}, expected {expected}",
        unexpected=unexpected,
        expected=expected,
    )


def unknown_variant(value: str, expected: Any) -> CustomError:
    return CustomError(
        f"unknown variant `{value}`, expected one of {list(expected)}",
        value=value,
        expected=list(expected),
    )


def unsupported_shape(shape: str) -> UnsupportedShapeError:
    return UnsupportedShapeError(f"data type not supported: {shape}", shape=shape)
