"""Tests for ContextVar-based scan configuration.

Validates thread isolation, context manager behavior, and how a Scanner
picks up the active configuration.
"""

from threading import Thread

import pytest

from cifras import (
    ScanConfig,
    Scanner,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
    tokenize,
)
from cifras.tokens import TokenType


class TestScanConfigDataclass:
    def test_default_values(self) -> None:
        assert ScanConfig().emit_eof is False

    def test_immutability(self) -> None:
        config = ScanConfig()
        with pytest.raises(AttributeError):
            config.emit_eof = True  # type: ignore[misc]

    def test_from_dict(self) -> None:
        config = ScanConfig.from_dict({"emit_eof": True})
        assert config.emit_eof is True

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = ScanConfig.from_dict({"emit_eof": True, "unknown_key": "ignored"})
        assert config == ScanConfig(emit_eof=True)

    def test_from_dict_empty(self) -> None:
        assert ScanConfig.from_dict({}) == ScanConfig()


class TestContextVarFunctions:
    def teardown_method(self) -> None:
        """Reset config after each test."""
        reset_scan_config()

    def test_default_config(self) -> None:
        assert get_scan_config().emit_eof is False

    def test_set_and_get(self) -> None:
        set_scan_config(ScanConfig(emit_eof=True))
        assert get_scan_config().emit_eof is True

    def test_reset(self) -> None:
        set_scan_config(ScanConfig(emit_eof=True))
        reset_scan_config()
        assert get_scan_config().emit_eof is False

    def test_scanner_uses_set_config(self) -> None:
        set_scan_config(ScanConfig(emit_eof=True))
        tokens = Scanner("1").tokenize()
        assert tokens[-1].type == TokenType.EOF


class TestContextManager:
    def test_restores_previous_config(self) -> None:
        with scan_config_context(ScanConfig(emit_eof=True)):
            assert get_scan_config().emit_eof is True
        assert get_scan_config().emit_eof is False

    def test_restores_on_exception(self) -> None:
        with pytest.raises(RuntimeError):
            with scan_config_context(ScanConfig(emit_eof=True)):
                raise RuntimeError("boom")
        assert get_scan_config().emit_eof is False

    def test_nested_contexts(self) -> None:
        with scan_config_context(ScanConfig(emit_eof=True)):
            with scan_config_context(ScanConfig(emit_eof=False)):
                assert get_scan_config().emit_eof is False
            assert get_scan_config().emit_eof is True

    def test_tokenize_config_argument(self) -> None:
        tokens = tokenize("1 + 2", config=ScanConfig(emit_eof=True))

        assert [t.type for t in tokens][-1] == TokenType.EOF
        assert get_scan_config().emit_eof is False


class TestThreadIsolation:
    def test_thread_isolation(self) -> None:
        """Each thread sees its own config."""
        results: dict[int, list[TokenType]] = {}

        def worker(thread_id: int, config: ScanConfig) -> None:
            set_scan_config(config)
            results[thread_id] = [t.type for t in Scanner("1").tokenize()]

        configs = [ScanConfig(emit_eof=True), ScanConfig(emit_eof=False)] * 2
        threads = [Thread(target=worker, args=(i, c)) for i, c in enumerate(configs)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results[0] == results[2] == [TokenType.INTEGER, TokenType.EOF]
        assert results[1] == results[3] == [TokenType.INTEGER]
        assert get_scan_config().emit_eof is False
