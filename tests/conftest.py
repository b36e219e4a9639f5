# tests/conftest.py
"""
Fixtures compartilhados para testes do Atlas TypedConfig.

Este módulo define fixtures reutilizáveis que fornecem:
- uma fábrica compacta de `ConfigItem`
- documentos canônicos usados por vários módulos de teste
- opções e trace determinísticos

Decisões arquiteturais:
    - Documentos são construídos em memória, sem I/O
    - Escalares Python são mapeados para `ConfigValue` pelo tipo:
      bool → Boolean, int/float → Number, str → String

Invariantes:
    - Nenhuma fixture executa decode
    - Todas as fixtures são seguras para execução em paralelo

Limites explícitos:
    - Não valida o loader YAML/JSON (ver tests/core/document/test_loader.py)
"""

import pytest

from atlas_typedconfig.core.document.model import ConfigItem, ConfigValue


def _value(raw) -> ConfigValue:
    if isinstance(raw, bool):
        return ConfigValue.boolean(raw)
    if isinstance(raw, (int, float)):
        return ConfigValue.number(raw)
    return ConfigValue.string(raw)


@pytest.fixture
def item():
    """
    Fixture factory que constrói `ConfigItem` a partir de escalares Python.

    Uso:
        item("port", 2003)
        item("address", children=[item("host", "localhost")])

    Returns:
        Callable: fábrica `(key, *values, children=()) -> ConfigItem`.
    """

    def _item(key, *values, children=()):
        return ConfigItem(
            key=key,
            values=tuple(_value(v) for v in values),
            children=tuple(children),
        )

    return _item


@pytest.fixture
def address_document(item):
    """
    Documento com a chave `address` repetida, cada ocorrência com filhos.

    A segunda ocorrência declara os filhos em ordem inversa, para
    exercitar a independência da ordem interna de cada bloco.
    """
    return (
        item(
            "address",
            children=[item("port", 2003), item("host", "localhost")],
        ),
        item(
            "address",
            children=[item("host", "127.0.0.1"), item("port", 2004)],
        ),
    )
