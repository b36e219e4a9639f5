# src/atlas_typedconfig/core/document/__init__.py
"""
Camada de documento do Atlas TypedConfig.

Este pacote contém o modelo de dados do documento de configuração
(itens ordenados com chaves repetíveis, valores escalares e filhos),
o agrupamento por escopo e o loader YAML/JSON usado por testes e
ferramentas.

Invariantes:
    - O documento é imutável durante a deserialização
    - A ordem do documento é sempre preservada

Limites explícitos:
    - Não conhece tipos de destino
    - Não executa deserialização
"""

from .model import ConfigItem, ConfigValue, ScalarKind, StrView
from .scope import Occurrence, Scope, ScopeEntry, group_scope
from .loader import items_from_data, load_items
from .errors import (
    DocumentError,
    DocumentNotFoundError,
    InvalidDocumentItemError,
    InvalidDocumentRootTypeError,
    UnsupportedDocumentFormatError,
)

__all__ = [
    "ConfigItem",
    "ConfigValue",
    "ScalarKind",
    "StrView",
    "Occurrence",
    "Scope",
    "ScopeEntry",
    "group_scope",
    "items_from_data",
    "load_items",
    "DocumentError",
    "DocumentNotFoundError",
    "InvalidDocumentItemError",
    "InvalidDocumentRootTypeError",
    "UnsupportedDocumentFormatError",
]
