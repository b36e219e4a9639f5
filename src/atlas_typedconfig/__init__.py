# src/atlas_typedconfig/__init__.py
"""
Atlas TypedConfig — deserialização type-directed de documentos de configuração.

Um documento é uma sequência ordenada de itens chave/valores/filhos, com
chaves repetíveis. Este pacote o converte diretamente em dataclasses,
decidindo apenas pela forma do tipo de destino como reinterpretar a
estrutura do documento (uma chave vs. várias ocorrências, bloco de
filhos vs. lista de escalares).

Arquitetura em alto nível:
    - core.document     → ConfigItem, ConfigValue, escopos e loader YAML/JSON
    - core.de           → cursor, protocolo, engine e driver de dataclasses
    - core.config       → DecodeOptions e seu loader
    - core.traceability → DecodeTrace
"""

from .core.document.model import ConfigItem, ConfigValue, ScalarKind, StrView
from .core.document.loader import items_from_data, load_items
from .core.de.derive import from_items, seed_for
from .core.de.engine import ConfigDeserializer, deserialize_items
from .core.de.errors import DeserializeError, ErrorKind
from .core.de.level import LogLevel
from .core.de.numbers import NumberPolicy, Width
from .core.de.shapes import Char, F32, F64, I8, I16, I32, I64, U8, U16, U32, U64
from .core.config.options import DecodeOptions, options_from_dict
from .core.config.loader import load_options
from .core.traceability.trace import DecodeTrace

__all__ = [
    "ConfigItem",
    "ConfigValue",
    "ScalarKind",
    "StrView",
    "items_from_data",
    "load_items",
    "from_items",
    "seed_for",
    "ConfigDeserializer",
    "deserialize_items",
    "DeserializeError",
    "ErrorKind",
    "LogLevel",
    "NumberPolicy",
    "Width",
    "Char",
    "F32",
    "F64",
    "I8",
    "I16",
    "I32",
    "I64",
    "U8",
    "U16",
    "U32",
    "U64",
    "DecodeOptions",
    "options_from_dict",
    "load_options",
    "DecodeTrace",
]
