"""Configuration management with pydantic and YAML support."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field

from .constants import GRASHOF_TOL, LINEAR_TOL

CONFIG_ENV_VAR = "FOURBAR_CONFIG"
PORT_ENV_VAR = "PORT"
LOG_LEVEL_ENV_VAR = "FOURBAR_LOG_LEVEL"


class SolverConfig(BaseModel):
    """Classifier and solver tolerances."""

    grashof_tol: float = Field(default=GRASHOF_TOL, gt=0.0, le=1e-3)
    linear_tol: float = Field(default=LINEAR_TOL, ge=0.0, le=1e-3)


class ServiceConfig(BaseModel):
    """HTTP service binding."""

    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)


class LoggingConfig(BaseModel):
    """Structured logger settings."""

    level: Literal["DEBUG", "INFO", "WARN", "ERROR"] = "INFO"


class FourBarConfig(BaseModel):
    """Root configuration object."""

    solver: SolverConfig = Field(default_factory=SolverConfig)
    service: ServiceConfig = Field(default_factory=ServiceConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(path: str | Path) -> FourBarConfig:
    """Read solver tolerances, service binding and log level from YAML.

    Sections missing from the file keep their defaults; an empty file gives
    the default configuration. Out-of-range values (a zero Grashof band, a
    port outside 1..65535, an unknown log level) fail pydantic validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    return FourBarConfig.model_validate(data or {})


def save_config(config: FourBarConfig, path: str | Path) -> None:
    """Write a configuration as YAML that load_config reads back unchanged.

    Parent directories are created as needed.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        yaml.safe_dump(config.model_dump(), f, default_flow_style=False)


def default_config() -> FourBarConfig:
    """Tolerances from core.constants, port 3000, INFO logging."""
    return FourBarConfig()


def merge_config(base: FourBarConfig, overrides: dict[str, Any]) -> FourBarConfig:
    """Apply nested overrides such as {"service": {"port": 8080}} to a config.

    Used for environment and CLI flag overrides. Sections are merged key by
    key, so overriding one solver tolerance keeps the other; the merged
    result is validated again.
    """
    base_dict = base.model_dump()

    def deep_merge(d1: dict, d2: dict) -> dict:
        result = d1.copy()
        for k, v in d2.items():
            if k in result and isinstance(result[k], dict) and isinstance(v, dict):
                result[k] = deep_merge(result[k], v)
            else:
                result[k] = v
        return result

    merged = deep_merge(base_dict, overrides)
    return FourBarConfig.model_validate(merged)


def config_from_env(environ: dict[str, str] | None = None) -> FourBarConfig:
    """Build configuration from the process environment.

    FOURBAR_CONFIG names an optional YAML file; PORT and FOURBAR_LOG_LEVEL
    override the values it (or the defaults) provide.
    """
    env = os.environ if environ is None else environ

    config_path = env.get(CONFIG_ENV_VAR)
    config = load_config(config_path) if config_path else default_config()

    overrides: dict[str, Any] = {}
    if env.get(PORT_ENV_VAR):
        overrides["service"] = {"port": int(env[PORT_ENV_VAR])}
    if env.get(LOG_LEVEL_ENV_VAR):
        overrides["logging"] = {"level": env[LOG_LEVEL_ENV_VAR].upper()}

    return merge_config(config, overrides) if overrides else config
