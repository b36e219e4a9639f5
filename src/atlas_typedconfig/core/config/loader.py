# src/atlas_typedconfig/core/config/loader.py
"""
Loader canônico das opções de decode.

Este módulo carrega `DecodeOptions` a partir de um arquivo YAML ou JSON,
validando requisitos estruturais mínimos antes de materializar as
opções.

Exemplo (YAML):

    number_policy: saturate
    trace: true

Invariantes:
    - Arquivos vazios produzem as opções padrão
    - O conteúdo raiz deve ser um mapa

Limites explícitos:
    - Não executa decode
    - Não persiste opções
"""

from pathlib import Path
from typing import Any, Dict
import json

import yaml  # PyYAML

from .errors import (
    InvalidOptionsError,
    OptionsNotFoundError,
    UnsupportedOptionsFormatError,
)
from .options import DecodeOptions, options_from_dict


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Carrega um arquivo de opções e valida sua estrutura básica.

    Args:
        path (Path): Caminho para o arquivo de opções.

    Returns:
        Dict[str, Any]: Conteúdo do arquivo carregado como dicionário.

    Raises:
        OptionsNotFoundError: Se o arquivo não existir.
        UnsupportedOptionsFormatError: Se o formato do arquivo não for suportado.
        InvalidOptionsError: Se o conteúdo raiz não for um dicionário.
    """
    if not path.exists():
        raise OptionsNotFoundError(f"Arquivo de opções não encontrado: {path}")

    suffix = path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)

    else:
        raise UnsupportedOptionsFormatError(f"Formato não suportado: {path.suffix}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidOptionsError(
            f"Options root deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def load_options(path: str) -> DecodeOptions:
    """
    Carrega e valida as opções de decode de um arquivo.

    Args:
        path (str): Caminho para o arquivo (.yaml, .yml ou .json).

    Returns:
        DecodeOptions: Opções validadas.

    Raises:
        OptionsNotFoundError: Se o arquivo não existir.
        UnsupportedOptionsFormatError: Se o formato do arquivo não for suportado.
        InvalidOptionsError: Se o conteúdo for estruturalmente inválido.
    """
    return options_from_dict(_load_file(Path(path)))
