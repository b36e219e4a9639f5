# tests/core/config/test_options.py
"""
Testes das opções de decode (DecodeOptions / load_options).

Este módulo valida o carregamento e a validação estrutural das opções
que controlam a política numérica e o trace do engine.

Os testes asseguram que:
- arquivos YAML e JSON produzem as mesmas opções
- arquivos vazios e `None` produzem as opções padrão
- chaves desconhecidas e valores fora do domínio são rejeitados
- o engine respeita `number_policy` e `trace`

Invariantes:
    - Nenhuma opção parcial é retornada em caso de erro

Limites explícitos:
    - Não valida o estreitamento em detalhe (ver tests/core/de/test_numbers.py)
"""

from dataclasses import dataclass
from pathlib import Path

import pytest

try:
    from atlas_typedconfig.core.config.loader import load_options
    from atlas_typedconfig.core.config.options import DecodeOptions, options_from_dict
    from atlas_typedconfig.core.config.errors import (
        InvalidOptionsError,
        OptionsError,
        OptionsNotFoundError,
        UnsupportedOptionsFormatError,
    )
except Exception as e:  # noqa: BLE001
    load_options = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None

from atlas_typedconfig import U8, from_items
from atlas_typedconfig.core.de.engine import ConfigDeserializer
from atlas_typedconfig.core.de.errors import NumberOutOfRangeError
from atlas_typedconfig.core.de.numbers import NumberPolicy


def _require_imports():
    """
    Garante que o loader de opções e suas exceções tipadas estejam disponíveis.

    Falha imediatamente, com mensagem explícita, quando o módulo
    `loader` ou as exceções de `errors` não podem ser importados.
    """
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing options loader/errors modules. Implement:\n"
            "- src/atlas_typedconfig/core/config/loader.py (load_options)\n"
            "- src/atlas_typedconfig/core/config/errors.py (typed exceptions)\n"
            f"Import error: {_IMPORT_ERR}"
        )


@dataclass
class Byte:
    value: U8


def test_defaults():
    _require_imports()
    opts = DecodeOptions()
    assert opts.number_policy is NumberPolicy.SATURATE
    assert opts.trace is False
    assert options_from_dict(None) == opts
    assert options_from_dict({}) == opts


def test_load_yaml(tmp_path: Path):
    _require_imports()
    path = tmp_path / "options.yaml"
    path.write_text("number_policy: Truncate\ntrace: true\n", encoding="utf-8")

    opts = load_options(str(path))

    assert opts == DecodeOptions(number_policy=NumberPolicy.TRUNCATE, trace=True)
    assert opts.to_dict() == {"number_policy": "truncate", "trace": True}


def test_load_json(tmp_path: Path):
    _require_imports()
    path = tmp_path / "options.json"
    path.write_text('{"number_policy": "checked"}', encoding="utf-8")

    assert load_options(str(path)).number_policy is NumberPolicy.CHECKED


def test_empty_file_gives_defaults(tmp_path: Path):
    _require_imports()
    path = tmp_path / "options.yml"
    path.write_text("", encoding="utf-8")
    assert load_options(str(path)) == DecodeOptions()


def test_missing_file(tmp_path: Path):
    _require_imports()
    with pytest.raises(OptionsNotFoundError):
        load_options(str(tmp_path / "options.yaml"))


def test_unsupported_format(tmp_path: Path):
    _require_imports()
    path = tmp_path / "options.ini"
    path.write_text("[x]", encoding="utf-8")
    with pytest.raises(UnsupportedOptionsFormatError):
        load_options(str(path))


def test_list_root_is_rejected(tmp_path: Path):
    _require_imports()
    path = tmp_path / "options.yaml"
    path.write_text("- trace\n", encoding="utf-8")
    with pytest.raises(InvalidOptionsError):
        load_options(str(path))


@pytest.mark.parametrize(
    "data",
    [
        {"verbose": True},
        {"number_policy": "round"},
        {"number_policy": 1},
        {"trace": "yes"},
    ],
)
def test_invalid_options(data):
    _require_imports()
    with pytest.raises(InvalidOptionsError) as exc:
        options_from_dict(data)
    assert isinstance(exc.value, OptionsError)


def test_policy_enum_is_accepted():
    _require_imports()
    opts = options_from_dict({"number_policy": NumberPolicy.TRUNCATE})
    assert opts.number_policy is NumberPolicy.TRUNCATE


@pytest.mark.parametrize(
    "policy,expected",
    [
        (NumberPolicy.TRUNCATE, 44),
        (NumberPolicy.SATURATE, 255),
        (None, 255),
    ],
)
def test_engine_honors_number_policy(item, policy, expected):
    opts = DecodeOptions() if policy is None else DecodeOptions(number_policy=policy)
    assert from_items([item("value", 300)], Byte, options=opts) == Byte(value=expected)


def test_engine_checked_policy_fails(item):
    opts = DecodeOptions(number_policy=NumberPolicy.CHECKED)
    with pytest.raises(NumberOutOfRangeError):
        from_items([item("value", 300)], Byte, options=opts)


def test_trace_option_creates_trace(item):
    de = ConfigDeserializer([item("value", 1)], options=DecodeOptions(trace=True))
    assert de.trace is not None
    assert de.cursor.trace is de.trace
    assert de.trace.meta == {"number_policy": "saturate"}

    assert ConfigDeserializer([]).trace is None
