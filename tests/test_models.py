"""Tests for the configuration models."""

from __future__ import annotations

import pytest

from apihandler.exceptions import ConfigError
from apihandler.models import CacheConfig, HandlerConfig, RequestConfig


class TestDefaults:
    def test_handler_config_defaults(self) -> None:
        config = HandlerConfig()
        assert config.cache.enabled is True
        assert config.cache.ttl_seconds == 60
        assert config.request.timeout is None
        assert config.request.verify_ssl is True
        assert config.request.follow_redirects is True

    def test_client_kwargs_omit_unset_timeout(self) -> None:
        kwargs = RequestConfig().client_kwargs()
        assert "timeout" not in kwargs
        assert kwargs == {"verify": True, "follow_redirects": True}

    def test_client_kwargs_include_timeout(self) -> None:
        kwargs = RequestConfig(timeout=3).client_kwargs()
        assert kwargs["timeout"] == 3


class TestFromDict:
    def test_partial_mapping(self) -> None:
        config = HandlerConfig.from_dict({"cache": {"ttl_seconds": 5}})
        assert config.cache.ttl_seconds == 5
        assert config.cache.enabled is True
        assert config.request == RequestConfig()

    def test_negative_ttl_rejected(self) -> None:
        with pytest.raises(ConfigError):
            HandlerConfig.from_dict({"cache": {"ttl_seconds": -1}})

    def test_non_positive_timeout_rejected(self) -> None:
        with pytest.raises(ConfigError):
            HandlerConfig.from_dict({"request": {"timeout": 0}})

    def test_wrong_type_rejected(self) -> None:
        with pytest.raises(ConfigError):
            HandlerConfig.from_dict({"cache": {"enabled": "sometimes"}})

    def test_cache_config_roundtrip(self) -> None:
        config = CacheConfig(enabled=False, ttl_seconds=10)
        assert CacheConfig.model_validate(config.model_dump()) == config
