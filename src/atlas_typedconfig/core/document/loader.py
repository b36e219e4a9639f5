# src/atlas_typedconfig/core/document/loader.py
"""
Loader de documentos de configuração a partir de YAML ou JSON.

Este módulo materializa árvores de `ConfigItem` a partir de arquivos
declarativos. Ele existe como adapter para testes, fixtures e
ferramentas; o parser nativo do documento permanece um colaborador
externo.

Formato esperado (v1):

    - key: address
      children:
        - key: port
          values: [2003]
        - key: host
          values: [localhost]
    - key: my_bool
      values: [true]

Mapeamento de escalares:
    - bool        → Boolean
    - int / float → Number
    - str         → String

Invariantes:
    - O retorno é sempre uma tupla de `ConfigItem`
    - A ordem dos itens no arquivo é preservada
    - Arquivos vazios produzem documento vazio

Limites explícitos:
    - Não realiza deserialização para tipos de destino
    - Não aceita mapas na raiz (não preservam chaves repetidas)
"""

from pathlib import Path
from typing import Any, Tuple
import json

import yaml  # PyYAML

from .model import ConfigItem, ConfigValue
from .errors import (
    DocumentNotFoundError,
    InvalidDocumentItemError,
    InvalidDocumentRootTypeError,
    UnsupportedDocumentFormatError,
)


_ITEM_FIELDS = {"key", "values", "children"}


def _to_value(raw: Any, where: str) -> ConfigValue:
    # bool antes de int: bool é subclasse de int
    if isinstance(raw, bool):
        return ConfigValue.boolean(raw)
    if isinstance(raw, (int, float)):
        return ConfigValue.number(float(raw))
    if isinstance(raw, str):
        return ConfigValue.string(raw)
    raise InvalidDocumentItemError(
        f"{where}: valor escalar não suportado: {type(raw).__name__}"
    )


def _to_item(raw: Any, where: str) -> ConfigItem:
    if not isinstance(raw, dict):
        raise InvalidDocumentItemError(
            f"{where}: item deve ser um mapa, recebido: {type(raw).__name__}"
        )

    unknown = set(raw) - _ITEM_FIELDS
    if unknown:
        raise InvalidDocumentItemError(
            f"{where}: campos desconhecidos no item: {sorted(unknown)}"
        )

    key = raw.get("key")
    if not isinstance(key, str) or not key:
        raise InvalidDocumentItemError(f"{where}: `key` é obrigatório e deve ser string")

    values = raw.get("values")
    if values is None:
        values = []
    elif not isinstance(values, list):
        # atalho: um único escalar
        values = [values]

    children = raw.get("children") or []
    if not isinstance(children, list):
        raise InvalidDocumentItemError(f"{where}.{key}: `children` deve ser uma lista")

    return ConfigItem(
        key=key,
        values=tuple(_to_value(v, f"{where}.{key}") for v in values),
        children=tuple(
            _to_item(c, f"{where}.{key}[{i}]") for i, c in enumerate(children)
        ),
    )


def items_from_data(data: Any) -> Tuple[ConfigItem, ...]:
    """
    Converte dados já carregados (listas/dicts Python) em `ConfigItem`.

    Args:
        data (Any): Lista de itens no formato do módulo, ou None.

    Returns:
        Tuple[ConfigItem, ...]: Documento na ordem original.

    Raises:
        InvalidDocumentRootTypeError: Se a raiz não for uma lista.
        InvalidDocumentItemError: Se algum item for inválido.
    """
    if data is None:
        return ()

    if not isinstance(data, list):
        raise InvalidDocumentRootTypeError(
            f"Documento deve ser uma lista de itens, recebido: {type(data).__name__}"
        )

    return tuple(_to_item(raw, f"items[{i}]") for i, raw in enumerate(data))


def load_items(path: str) -> Tuple[ConfigItem, ...]:
    """
    Carrega um documento de configuração a partir de YAML ou JSON.

    Args:
        path (str): Caminho do arquivo (.yaml, .yml ou .json).

    Returns:
        Tuple[ConfigItem, ...]: Documento materializado.

    Raises:
        DocumentNotFoundError: Se o arquivo não existir.
        UnsupportedDocumentFormatError: Se o formato não for suportado.
        InvalidDocumentRootTypeError: Se a raiz não for uma lista.
        InvalidDocumentItemError: Se algum item for inválido.
    """
    file = Path(path)
    if not file.exists():
        raise DocumentNotFoundError(f"Documento não encontrado: {file}")

    suffix = file.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        with file.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

    elif suffix == ".json":
        with file.open("r", encoding="utf-8") as f:
            data = json.load(f)

    else:
        raise UnsupportedDocumentFormatError(f"Formato não suportado: {file.suffix}")

    return items_from_data(data)
