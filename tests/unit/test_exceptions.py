"""Tests for the ChainException hierarchy."""

from __future__ import annotations

from fastapi_middleware_chain.exceptions import (
    ChainAbort,
    ChainException,
    ChainInternalError,
    ConfigurationUnavailable,
)


class TestChainAbort:
    def test_default_status_code(self) -> None:
        exc = ChainAbort("bad")
        assert exc.status_code == 400
        assert exc.detail == "bad"
        assert str(exc) == "bad"

    def test_custom_status_code(self) -> None:
        exc = ChainAbort("gone", status_code=410)
        assert exc.status_code == 410

    def test_is_chain_exception(self) -> None:
        assert isinstance(ChainAbort("x"), ChainException)


class TestConfigurationUnavailable:
    def test_status_and_detail(self) -> None:
        exc = ConfigurationUnavailable()
        assert exc.status_code == 500
        assert exc.detail == "Configuration not found in context"

    def test_is_abort(self) -> None:
        assert isinstance(ConfigurationUnavailable(), ChainAbort)


class TestChainInternalError:
    def test_wraps_cause(self) -> None:
        cause = RuntimeError("boom")
        exc = ChainInternalError("Internal chain error", cause=cause)
        assert exc.cause is cause
        assert exc.detail == "Internal chain error"

    def test_is_not_abort(self) -> None:
        assert not isinstance(ChainInternalError("x"), ChainAbort)
