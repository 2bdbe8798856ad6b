"""Tests for the top-level cifras API."""

from concurrent.futures import ThreadPoolExecutor

import pytest

import cifras
from cifras import Scanner, Token, TokenType, UnrecognizedCharacterError, tokenize


class TestTokenize:
    def test_returns_tokens(self) -> None:
        tokens = tokenize("1500+89 / 6 -9*45  ")

        assert all(isinstance(t, Token) for t in tokens)
        assert [t.value for t in tokens] == ["1500", "+", "89", "/", "6", "-", "9", "*", "45"]

    def test_matches_scanner(self) -> None:
        source = "3 * 45 - 6"

        assert tokenize(source) == Scanner(source).tokenize()

    def test_source_file(self) -> None:
        tokens = tokenize("1", source_file="a.txt")

        assert tokens[0].location.source_file == "a.txt"

    def test_kinds(self) -> None:
        tokens = tokenize("42 / 7")

        assert [t.type for t in tokens] == [
            TokenType.INTEGER,
            TokenType.DIVIDE,
            TokenType.INTEGER,
        ]

    def test_integer_values(self) -> None:
        values = [t.int_value for t in tokenize("1500 + 89")]

        assert values == [1500, None, 89]

    def test_error(self) -> None:
        with pytest.raises(UnrecognizedCharacterError):
            tokenize("3~4")


class TestConcurrentScanning:
    """Independent scanners share nothing and can run in parallel."""

    def test_parallel_tokenize(self) -> None:
        sources = [f"{i} + {i * 7} * 3" for i in range(200)]

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(tokenize, sources))

        for i, tokens in enumerate(results):
            assert [t.int_value for t in tokens] == [i, None, i * 7, None, 3]

    def test_parallel_failures_report_own_offsets(self) -> None:
        sources = [" " * i + "~" for i in range(50)]

        def offset_of(source: str) -> int:
            try:
                tokenize(source)
            except UnrecognizedCharacterError as e:
                assert e.offset is not None
                return e.offset
            raise AssertionError("expected failure")

        with ThreadPoolExecutor(max_workers=8) as pool:
            offsets = list(pool.map(offset_of, sources))

        assert offsets == list(range(50))


def test_version_exposed() -> None:
    assert isinstance(cifras.__version__, str)
