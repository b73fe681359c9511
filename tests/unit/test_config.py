"""Tests for configuration loading, flag parsing and the plugin loader."""

import pytest

from ttempdir.analyzer import TempDirAnalyzer
from ttempdir.cli.flags import parse_flags
from ttempdir.config import (
    AnalyzerConfig,
    ConfigError,
    find_config_file,
    flag_name,
    load_config,
)
from ttempdir.plugin import get_analyzers


def test_defaults():
    config = AnalyzerConfig()
    assert config.all_functions is False
    assert config.max_recursion_level == 5


def test_aliases():
    config = AnalyzerConfig.model_validate({"all": True, "max-recursion-level": 10})
    assert config.all_functions is True
    assert config.max_recursion_level == 10


def test_negative_recursion_level_rejected():
    with pytest.raises(ConfigError):
        AnalyzerConfig().merged(max_recursion_level=-1)


def test_flag_name_prefix():
    assert flag_name("all") == "all"
    assert flag_name("max-recursion-level", "linter") == "linter-max-recursion-level"


def test_load_config_without_file():
    assert load_config() == AnalyzerConfig()


def test_load_config_found_in_parent(tmp_path, monkeypatch):
    (tmp_path / ".ttempdir.toml").write_text(
        'all = true\nmax-recursion-level = 7\n\n[[whitelist]]\nfile = "*.go"\n'
    )
    nested = tmp_path / "pkg" / "sub"
    nested.mkdir(parents=True)
    monkeypatch.chdir(nested)

    assert find_config_file() == (tmp_path / ".ttempdir.toml").resolve()
    config = load_config()
    assert config.all_functions is True
    assert config.max_recursion_level == 7


@pytest.mark.parametrize(
    "content",
    [
        "all = \n",  # bad TOML
        "max-recursion-level = -2\n",
        "unknown = 1\n",
    ],
)
def test_invalid_config_file(tmp_path, content):
    path = tmp_path / "bad.toml"
    path.write_text(content)
    with pytest.raises(ConfigError):
        load_config(path)


def test_parse_flags():
    config = parse_flags(["--all", "--max-recursion-level", "10"])
    assert config == AnalyzerConfig(all=True, max_recursion_level=10)


def test_parse_flags_keeps_base_values_for_missing_flags():
    base = AnalyzerConfig(all=True, max_recursion_level=3)
    assert parse_flags([], base=base) == base
    assert parse_flags(["--max-recursion-level", "8"], base=base) == AnalyzerConfig(
        all=True, max_recursion_level=8
    )


def test_no_all_overrides_base():
    base = AnalyzerConfig(all=True, max_recursion_level=3)
    assert parse_flags(["--no-all"], base=base) == AnalyzerConfig(
        all=False, max_recursion_level=3
    )


def test_parse_flags_with_prefix():
    config = parse_flags(["--linter-all"], prefix="linter")
    assert config.all_functions is True
    base = AnalyzerConfig(all=True)
    assert parse_flags(["--no-linter-all"], prefix="linter", base=base).all_functions is False
    with pytest.raises(ConfigError):
        parse_flags(["--all"], prefix="linter")


@pytest.mark.parametrize(
    "args", [["--max-recursion-level", "-1"], ["--max-recursion-level", "many"], ["--bogus"]]
)
def test_parse_flags_errors(args):
    with pytest.raises(ConfigError, match="cannot parse flags of ttempdir"):
        parse_flags(args)


def test_plugin_get_analyzers():
    (analyzer,) = get_analyzers("--all --max-recursion-level 2")
    assert isinstance(analyzer, TempDirAnalyzer)
    assert analyzer.config == AnalyzerConfig(all=True, max_recursion_level=2)

    (default,) = get_analyzers()
    assert default.config == AnalyzerConfig()


def test_plugin_rejects_bad_flags():
    with pytest.raises(ConfigError):
        get_analyzers("--max-recursion-level=x")
