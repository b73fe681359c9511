"""Pytest configuration and shared fixtures."""

import textwrap

import pytest
from click.testing import CliRunner

from ttempdir.cli import cli


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run every test from an empty directory.

    Config and whitelist lookups walk up from the cwd; this keeps a
    developer's own .ttempdir.toml out of the tests.
    """
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args.

    Usage:
        result = invoke(["check", "pkg/"])  # returns click.Result
    """

    def _invoke(args, input_data=None):
        return cli_runner.invoke(cli, args, input=input_data)

    return _invoke


@pytest.fixture
def write_go(tmp_path):
    """Write dedented Go source below tmp_path and return its path."""

    def _write(relative_path, body):
        path = tmp_path / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(body).lstrip())
        return path

    return _write
