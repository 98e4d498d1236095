"""Configuration for the process metrics collector."""

import os
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from procmetrics.errors import ConfigurationError

DEFAULT_PROC_PATH = "/proc"
ENV_PROC_PATH = "PROCMETRICS_PROC_PATH"


class CollectorConfig(BaseModel):
    """Collector settings. The only option is the process table root."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    proc_path: str = DEFAULT_PROC_PATH

    @field_validator("proc_path")
    @classmethod
    def validate_proc_path(cls, v: str) -> str:
        """Reject blank paths and trailing slashes."""
        v = v.strip()
        if not v:
            raise ValueError("proc_path must not be empty")
        return v.rstrip("/") or "/"

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "CollectorConfig":
        """Build a config from a plain mapping, e.g. host-supplied settings."""
        try:
            return cls.model_validate(dict(data or {}))
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid collector configuration: {exc}") from exc

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "CollectorConfig":
        """Build a config from environment variables."""
        environ = os.environ if environ is None else environ
        data = {}
        if ENV_PROC_PATH in environ:
            data["proc_path"] = environ[ENV_PROC_PATH]
        return cls.from_mapping(data)
