"""Configuration loading utilities for edtoken."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Mapping, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

_PRIVATE_KEY_ENV = "EDTOKEN_PRIVATE_KEY"
_PUBLIC_KEY_ENV = "EDTOKEN_PUBLIC_KEY"
_LOG_LEVEL_ENV = "EDTOKEN_LOG_LEVEL"


class KeysConfig(BaseModel):
    private_key: Optional[Path] = Field(default=None, description="PEM file with the PKCS#8 Ed25519 private key")
    public_key: Optional[Path] = Field(default=None, description="PEM file with the Ed25519 SubjectPublicKeyInfo")

    @field_validator("private_key", "public_key")
    @classmethod
    def _expand(cls, value: Optional[Path]) -> Optional[Path]:
        if value is None:
            return None
        return value.expanduser()


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO", description="Logging verbosity level")

    def normalized_level(self) -> str:
        return self.level.upper()


class AppConfig(BaseModel):
    keys: KeysConfig = Field(default_factory=KeysConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


DEFAULT_CONFIG = AppConfig()


def config_search_paths(explicit: Optional[Path] = None) -> Iterable[Path]:
    if explicit:
        yield explicit
    yield Path.cwd() / ".edtoken" / "config.yaml"
    yield Path.home() / ".config" / "edtoken" / "config.yaml"


def _apply_env(config: AppConfig, environ: Mapping[str, str]) -> AppConfig:
    keys = config.keys.model_copy()
    if environ.get(_PRIVATE_KEY_ENV):
        keys.private_key = Path(environ[_PRIVATE_KEY_ENV]).expanduser()
    if environ.get(_PUBLIC_KEY_ENV):
        keys.public_key = Path(environ[_PUBLIC_KEY_ENV]).expanduser()
    logging_config = config.logging.model_copy()
    if environ.get(_LOG_LEVEL_ENV):
        logging_config.level = environ[_LOG_LEVEL_ENV]
    return config.model_copy(update={"keys": keys, "logging": logging_config})


def load_config(path: Optional[Path] = None, environ: Optional[Mapping[str, str]] = None) -> AppConfig:
    env = os.environ if environ is None else environ
    for candidate in config_search_paths(path):
        if candidate.is_file():
            with candidate.open("r", encoding="utf-8") as handle:
                data = yaml.safe_load(handle) or {}
            try:
                config = AppConfig.model_validate(data)
            except ValidationError as exc:
                raise ValueError(f"Invalid configuration in {candidate}: {exc}") from exc
            return _apply_env(config, env)
    return _apply_env(DEFAULT_CONFIG.model_copy(deep=True), env)


__all__ = ["AppConfig", "DEFAULT_CONFIG", "KeysConfig", "LoggingConfig", "config_search_paths", "load_config"]
