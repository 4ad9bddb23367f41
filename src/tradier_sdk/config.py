"""Tradier config loading from config.json plus env overrides."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

PRODUCTION_BASE_URL = "https://api.tradier.com"
SANDBOX_BASE_URL = "https://sandbox.tradier.com"


def _env_path(name: str, fallback: Path) -> Path:
    raw = os.environ.get(name, "").strip()
    return Path(raw).expanduser() if raw else fallback.expanduser()


_USER_HOME = Path.home()
_XDG_CONFIG_HOME = _env_path("XDG_CONFIG_HOME", _USER_HOME / ".config")
DEFAULT_CONFIG_HOME = _XDG_CONFIG_HOME / "tradier"
DEFAULT_TRADIER_CONFIG_JSON = _env_path("TRADIER_CONFIG_JSON", DEFAULT_CONFIG_HOME / "config.json")

SECTIONS = {"api", "logging", "output", "runtime"}
# Flat keys written by earlier releases at the top level of config.json.
LEGACY_API_KEYS = {"production_api_key", "production_account_id", "sandbox_api_key", "sandbox_account_id"}


class ApiConfig(BaseModel):
    production_api_key: str = ""
    production_account_id: str = ""
    sandbox_api_key: str = ""
    sandbox_account_id: str = ""


class LoggingConfig(BaseModel):
    level: str = "WARNING"
    log_file: Path | None = None


class OutputConfig(BaseModel):
    default_format: str = "table"

    @field_validator("default_format")
    @classmethod
    def _validate_format(cls, value: str) -> str:
        fmt = value.strip().lower()
        if fmt not in {"table", "json"}:
            raise ValueError("output.default_format must be 'table' or 'json'")
        return fmt


class RuntimeConfig(BaseModel):
    request_timeout_seconds: float = 30.0


class AppConfig(BaseModel):
    sandbox: bool = False
    api: ApiConfig = Field(default_factory=ApiConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    runtime: RuntimeConfig = Field(default_factory=RuntimeConfig)

    def base_url(self, sandbox: bool | None = None) -> str:
        return SANDBOX_BASE_URL if self._use_sandbox(sandbox) else PRODUCTION_BASE_URL

    def api_key(self, sandbox: bool | None = None) -> str:
        if self._use_sandbox(sandbox):
            return self.api.sandbox_api_key.strip()
        return self.api.production_api_key.strip()

    def account_id(self, sandbox: bool | None = None) -> str:
        if self._use_sandbox(sandbox):
            return self.api.sandbox_account_id.strip()
        return self.api.production_account_id.strip()

    def expanded(self) -> "AppConfig":
        clone = self.model_copy(deep=True)
        if clone.logging.log_file is not None:
            clone.logging.log_file = clone.logging.log_file.expanduser()
        return clone

    def _use_sandbox(self, sandbox: bool | None) -> bool:
        return self.sandbox if sandbox is None else sandbox


def _coerce_env_value(value: str) -> Any:
    lower = value.lower()
    if lower in {"true", "false"}:
        return lower == "true"
    try:
        if "." in value:
            return float(value)
        return int(value)
    except ValueError:
        return value


def _read_config_json(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}

    try:
        loaded = json.loads(path.read_text(encoding="utf-8"))
    except Exception:
        return {}

    if isinstance(loaded, dict):
        return loaded
    return {}


def _extract_config(data: dict[str, Any]) -> dict[str, Any]:
    out: dict[str, Any] = {}

    api = {key: data[key] for key in LEGACY_API_KEYS if isinstance(data.get(key), str)}
    for section in SECTIONS:
        value = data.get(section)
        if isinstance(value, dict):
            out[section] = dict(value)
    if api:
        out["api"] = {**api, **out.get("api", {})}

    sandbox = data.get("sandbox")
    if isinstance(sandbox, bool):
        out["sandbox"] = sandbox
    return out


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    result = dict(data)
    for key, raw in os.environ.items():
        if key == "TRADIER_SANDBOX":
            result["sandbox"] = _coerce_env_value(raw.strip())
            continue
        if not key.startswith("TRADIER_"):
            continue
        tokens = key[len("TRADIER_") :].lower().split("_")
        section = tokens[0]
        if section not in SECTIONS or len(tokens) == 1:
            continue
        field = "_".join(tokens[1:])
        section_obj = dict(result.get(section, {}))
        # credentials and ids are opaque strings even when they look numeric
        section_obj[field] = raw.strip() if section == "api" else _coerce_env_value(raw)
        result[section] = section_obj
    return result


def load_config() -> AppConfig:
    raw = _read_config_json(DEFAULT_TRADIER_CONFIG_JSON)
    from_file = _extract_config(raw)
    merged = _apply_env_overrides(from_file)
    return AppConfig.model_validate(merged).expanded()
