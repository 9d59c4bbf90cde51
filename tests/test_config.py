from pathlib import Path

import pytest

from calc.config import CalcConfig, load_config, make_calculator, resolve_holder_factory
from calc.errors import CalcUserError, ConfigError, HolderResolveError
from calc.holder import DataHolder
from tests.infrastructure import write, write_calc_yaml


def test_missing_file_gives_defaults(tmp_path: Path):
    assert load_config(tmp_path) == CalcConfig()


def test_empty_file_gives_defaults(tmp_path: Path):
    write(tmp_path / "calc.yaml", "")
    assert load_config(tmp_path) == CalcConfig(holder=None, log_level=None)


def test_full_config(tmp_path: Path):
    write_calc_yaml(tmp_path, """
    holder: "fake_holders:Seven"
    log_level: debug
    """)
    cfg = load_config(tmp_path)
    assert cfg.holder == "fake_holders:Seven"
    assert cfg.log_level == "DEBUG"


@pytest.mark.parametrize("text,needle", [
    ("- a\n- b\n", "must be a mapping"),
    ("holder: x:y\ncolour: red\n", "unknown keys: colour"),
    ("holder: 5\n", "holder"),
    ("log_level: LOUD\n", "log_level"),
    ("holder: [unclosed\n", "invalid YAML"),
])
def test_invalid_config(tmp_path: Path, text, needle):
    write(tmp_path / "calc.yaml", text)
    with pytest.raises(ConfigError) as ei:
        load_config(tmp_path)
    assert needle in str(ei.value)
    assert isinstance(ei.value, CalcUserError)


def test_resolve_none_is_data_holder():
    assert resolve_holder_factory(None) is DataHolder


def test_resolve_class_and_function(holder_proj):
    assert resolve_holder_factory("fake_holders:Seven")().report() == 7
    assert resolve_holder_factory("fake_holders:make_seven")().report() == 7
    assert resolve_holder_factory("fake_holders:Factories.make_seven")().report() == 7


@pytest.mark.parametrize("ref,needle", [
    ("fake_holders", "Expected 'module:attr'"),
    (":Seven", "Expected 'module:attr'"),
    ("fake_holders:", "Expected 'module:attr'"),
    ("no_such_module_xyz:Seven", "Cannot import"),
    ("fake_holders:Missing", "'Missing' not found"),
    ("fake_holders:NOT_CALLABLE", "not callable"),
])
def test_resolve_errors(holder_proj, ref, needle):
    with pytest.raises(HolderResolveError, match=needle):
        resolve_holder_factory(ref)


def test_make_calculator_uses_configured_holder(holder_proj):
    write_calc_yaml(holder_proj, 'holder: "fake_holders:Seven"')
    calc = make_calculator(holder_proj)
    assert calc.data_holder_test() == 7
    assert calc.get_last_result() == 0


def test_make_calculator_lets_holder_errors_through(holder_proj):
    write_calc_yaml(holder_proj, 'holder: "fake_holders:Boom"')
    calc = make_calculator(holder_proj)
    with pytest.raises(RuntimeError, match="boom"):
        calc.data_holder_test()
