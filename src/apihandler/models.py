"""Pydantic configuration models for the API handlers.

:class:`HandlerConfig` bundles the transport settings
(:class:`RequestConfig`) and the response cache settings
(:class:`CacheConfig`). All fields have defaults, so ``HandlerConfig()``
reproduces the stock behaviour: ``httpx`` default timeouts and a
60-second GET cache.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError

from apihandler.exceptions import ConfigError

DEFAULT_TTL_SECONDS = 60.0


class RequestConfig(BaseModel):
    """HTTP transport settings applied to every call made by a handler."""

    timeout: Optional[float] = Field(
        default=None,
        gt=0,
        description="Request timeout in seconds; None keeps the httpx default",
    )
    verify_ssl: bool = Field(default=True, description="Verify SSL certificates")
    follow_redirects: bool = Field(default=True, description="Follow 3xx redirects")

    def client_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for constructing an ``httpx`` client."""
        kwargs: dict[str, Any] = {
            "verify": self.verify_ssl,
            "follow_redirects": self.follow_redirects,
        }
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        return kwargs


class CacheConfig(BaseModel):
    """GET response cache settings."""

    enabled: bool = Field(default=True, description="Enable response caching")
    ttl_seconds: float = Field(
        default=DEFAULT_TTL_SECONDS, ge=0, description="Cache TTL in seconds"
    )


class HandlerConfig(BaseModel):
    """Top-level configuration accepted by the API handlers."""

    request: RequestConfig = Field(default_factory=RequestConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> HandlerConfig:
        """Validate a plain mapping into a :class:`HandlerConfig`.

        Args:
            data: Mapping shaped like ``{"request": {...}, "cache": {...}}``.

        Raises:
            ConfigError: If any field fails validation.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ConfigError(f"Invalid handler configuration: {exc}") from exc
