"""Unit tests for query/sort definition loading."""

import pytest

from jsongrep.config import load_query, load_settings, read_definition
from jsongrep.exceptions import OptionError, QueryParseError
from jsongrep.query import RawQuery, SelectAll


def test_read_inline():
    assert read_definition("{}", None, "query") == "{}"


def test_read_file(tmp_path):
    path = tmp_path / "query.json"
    path.write_text('{"x": 1}', encoding="utf-8")
    assert read_definition(None, path, "query") == '{"x": 1}'


def test_exclusive(tmp_path):
    path = tmp_path / "query.json"
    path.write_text("{}", encoding="utf-8")
    with pytest.raises(OptionError) as exc_info:
        read_definition("{}", path, "query")
    assert str(exc_info.value) == (
        "Invalid option (raw_query and query_file are exclusive)"
    )


def test_blank_inline_is_absent():
    assert read_definition("  ", None, "sort") is None


def test_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_definition(None, tmp_path / "nope.json", "query")


def test_no_query_selects_all():
    assert isinstance(load_query(None, None), SelectAll)


def test_load_settings(tmp_path, regex_query):
    path = tmp_path / "query.json"
    path.write_text(regex_query, encoding="utf-8")
    settings = load_settings(
        query_file=path, raw_sort='{"sort":[{"p":"/i"}]}'
    )
    assert isinstance(settings.query, RawQuery)
    assert len(settings.sort_keys) == 1
    sorter = settings.make_sorter()
    assert sorter is not None and len(sorter) == 0
    # a fresh sorter per run
    assert settings.make_sorter() is not sorter


def test_load_settings_without_sort(regex_query):
    assert load_settings(raw_query=regex_query).make_sorter() is None


def test_bad_query_is_fatal():
    with pytest.raises(QueryParseError):
        load_settings(raw_query='{"query": {}}')
