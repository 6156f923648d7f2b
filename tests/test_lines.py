"""Tests for iniread.parsers.lines."""
from __future__ import annotations

import pytest

from iniread.parsers.lines import match_key, parse_section, split_key_value


class TestParseSection:
    @pytest.mark.parametrize(
        "line,expected",
        [
            ("[A]", "A"),
            ("[  spaced name \t]", "spaced name"),
            ("[a]b]", "a"),
            ("[x] = [y]", "x"),
            ("[server.http]", "server.http"),
        ],
    )
    def test_headers(self, line: str, expected: str) -> None:
        assert parse_section(line) == expected

    @pytest.mark.parametrize(
        "line", ["[]", "[ ]", "[\t\t]", "[A", "A]", "x", "", "k = [v]", "[[a]", "[a[b]"]
    )
    def test_not_headers(self, line: str) -> None:
        assert parse_section(line) is None


class TestSplitKeyValue:
    @pytest.mark.parametrize(
        "line,expected",
        [
            ("key = value", ("key", "value")),
            ("key:value", ("key", "value")),
            ("key\t=\tvalue with spaces", ("key", "value with spaces")),
            ("k==v", ("k", "=v")),
            ("k: v: w", ("k", "v: w")),
            ("url = http://example.com", ("url", "http://example.com")),
            ("k = v = w", ("k", "v = w")),
        ],
    )
    def test_pairs(self, line: str, expected: tuple[str, str]) -> None:
        assert split_key_value(line) == expected

    @pytest.mark.parametrize("line", ["a b = c", "=v", ":v", "k =", "k:", "k", "", "[ ]"])
    def test_rejected(self, line: str) -> None:
        assert split_key_value(line) is None

    def test_equals_and_colon_forms_agree(self) -> None:
        assert split_key_value("name = x") == split_key_value("name:x")


class TestMatchKey:
    def test_match(self) -> None:
        assert match_key("k = v", "k") == "v"
        assert match_key("k:v", "k") == "v"
        assert match_key("k\t=  two words", "k") == "two words"

    def test_prefix_of_longer_key_does_not_match(self) -> None:
        assert match_key("kk = v", "k") is None

    def test_empty_value_does_not_match(self) -> None:
        assert match_key("k =", "k") is None

    @pytest.mark.parametrize("key", ["", "a b", "a=b", "a:"])
    def test_keys_that_cannot_be_parsed_never_match(self, key: str) -> None:
        assert match_key(f"{key} = v", key) is None

    @pytest.mark.parametrize(
        "line", ["k = v", "k:v", "kk = v", "k =", "k", "k v = w", "x = k"]
    )
    def test_agrees_with_split_key_value(self, line: str) -> None:
        kv = split_key_value(line)
        expected = kv[1] if kv and kv[0] == "k" else None
        assert match_key(line, "k") == expected
