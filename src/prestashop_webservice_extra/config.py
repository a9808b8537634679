"""
Query builder configuration.

Holds the shop base URL (used to build blank-schema URLs) and the debug flag.
"""

from __future__ import annotations
import os
from typing import Any, Mapping, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, Field, field_validator

URL_ENV_VAR = "PRESTASHOP_WEBSERVICE_URL"
DEBUG_ENV_VAR = "PRESTASHOP_WEBSERVICE_DEBUG"


class BuilderConfig(BaseModel):
    """
    Configuration for a query builder.

    Example:
        ```python
        config = BuilderConfig(url="https://shop.example.com/", debug=True)
        config.url  # "https://shop.example.com"
        ```
    """
    url: str = Field(description="Shop base URL, without the /api suffix")
    debug: bool = Field(default=False, description="Log query sessions at DEBUG level")

    model_config = {"frozen": True}

    @field_validator('url', mode='before')
    @classmethod
    def validate_url(cls, v: Any) -> str:
        """Require an http(s) URL with a host and strip trailing slashes."""
        if not isinstance(v, str):
            raise ValueError(f"url must be a string, got {type(v)}")
        v = v.strip().rstrip('/')
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"url must be an absolute http(s) URL, got {v!r}")
        return v

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> BuilderConfig:
        """
        Load configuration from environment variables.

        Reads ``PRESTASHOP_WEBSERVICE_URL`` and ``PRESTASHOP_WEBSERVICE_DEBUG``.

        Args:
            environ: Mapping to read instead of ``os.environ``

        Raises:
            pydantic.ValidationError: If the URL is missing or invalid
        """
        env = os.environ if environ is None else environ
        data: dict = {"url": env.get(URL_ENV_VAR)}
        debug = env.get(DEBUG_ENV_VAR)
        if debug is not None and debug.strip() != "":
            data["debug"] = debug.strip()
        return cls.model_validate(data)


__all__ = ["BuilderConfig", "URL_ENV_VAR", "DEBUG_ENV_VAR"]
