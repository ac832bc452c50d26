"""Tests for src/domain/context.py."""

from unittest.mock import AsyncMock

from src.domain.context import RequestContext


def _ctx(**params):
    return RequestContext(session=AsyncMock(), params=params)


def test_params_default_to_empty():
    assert RequestContext(session=AsyncMock()).params == {}


def test_has_param_true_when_present():
    assert _ctx(**{"like.name": "app"}).has_param("like.name") is True


def test_has_param_false_when_missing():
    assert _ctx().has_param("like.name") is False


def test_has_param_false_when_blank():
    assert _ctx(**{"like.name": "  "}).has_param("like.name") is False


def test_param_returns_default_when_missing():
    assert _ctx().param("x", "fallback") == "fallback"


def test_like_param_wraps_and_lowercases():
    assert _ctx(**{"like.name": " ApP "}).like_param("like.name") == "%app%"


def test_like_param_none_when_missing():
    assert _ctx().like_param("like.name") is None
