"""Pytest configuration and shared fixtures."""

import pytest
from click.testing import CliRunner

from jsongrep.cli import cli
from tests.helpers import make_query

ENV_VARS = (
    "JSONGREP_QUERY",
    "JSONGREP_QUERY_FILE",
    "JSONGREP_SORT",
    "JSONGREP_SORT_FILE",
)


@pytest.fixture(autouse=True)
def clear_jsongrep_env(monkeypatch):
    """Keep definitions from the developer's shell out of the tests."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args and optional input.

    Usage:
        result = invoke(["-r", query], input_data=lines)
        result.exit_code, result.stdout, result.stderr
    """

    def _invoke(args, input_data=None, env=None):
        return cli_runner.invoke(cli, args, input=input_data, env=env)

    return _invoke


@pytest.fixture
def regex_query():
    """Query selecting /s by regex [sS]irius."""
    return make_query("/s", "regex", "string", "[sS]irius")


@pytest.fixture
def star_lines():
    """Mixed input: passing, failing and erroring lines."""
    return [
        '{"s":"Sirius","i":0}',
        "not json",
        '{"a":[]}',
        '{"s":1}',
        '{"s":"xirius"}',
        '{"s":"sirius"}',
    ]


@pytest.fixture
def sample_ndjson(star_lines):
    """Provide the mixed input as NDJSON text."""
    return "\n".join(star_lines) + "\n"
