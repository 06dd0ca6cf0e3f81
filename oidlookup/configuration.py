"""Layered configuration loader for oidlookup."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence

import yaml
from dotenv import dotenv_values
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigurationError

APP_NAME = "oidlookup"


class OidLookupConfig(BaseModel):
    """Schema describing all supported configuration options."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    OIDLOOKUP_BUFFER_NAME: str = Field(
        default="__SNMP_Translate__",
        min_length=1,
        description="Name of the scratch buffer that receives translator output.",
    )
    OIDLOOKUP_BUFFER_SIZE: int = Field(
        default=10,
        ge=1,
        description="Visible height of the result buffer, in lines.",
    )
    OIDLOOKUP_TRANSLATOR: str = Field(
        default="snmptranslate",
        min_length=1,
        description="Path to the translator executable.",
    )
    OIDLOOKUP_LOGGING: bool = Field(
        default=False,
        description="Let the translator print MIB parser diagnostics (omits -Ln).",
    )
    OIDLOOKUP_ECHO_COMMAND: bool = Field(
        default=True,
        description="Show the invocation as the first line of the result buffer.",
    )
    OIDLOOKUP_KEY_BINDING: Optional[str] = Field(
        default=None,
        description="Key sequence bound to the infer command in the editor window.",
    )
    OIDLOOKUP_SYNTAX: Optional[str] = Field(
        default="mib",
        description="Syntax hint applied to the result buffer.",
    )
    OIDLOOKUP_TRANSLATOR_TIMEOUT: Optional[float] = Field(
        default=None,
        gt=0,
        description="Seconds to wait for the translator; unset waits forever.",
    )

    @field_validator(
        "OIDLOOKUP_KEY_BINDING",
        "OIDLOOKUP_SYNTAX",
        "OIDLOOKUP_TRANSLATOR_TIMEOUT",
        mode="before",
    )
    @classmethod
    def _blank_is_unset(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def buffer_name(self) -> str:
        return self.OIDLOOKUP_BUFFER_NAME

    @property
    def buffer_size(self) -> int:
        return self.OIDLOOKUP_BUFFER_SIZE

    @property
    def translator(self) -> str:
        return self.OIDLOOKUP_TRANSLATOR

    @property
    def logging_enabled(self) -> bool:
        return self.OIDLOOKUP_LOGGING

    @property
    def echo_command(self) -> bool:
        return self.OIDLOOKUP_ECHO_COMMAND

    @property
    def key_binding(self) -> Optional[str]:
        return self.OIDLOOKUP_KEY_BINDING

    @property
    def syntax(self) -> Optional[str]:
        return self.OIDLOOKUP_SYNTAX

    @property
    def timeout(self) -> Optional[float]:
        return self.OIDLOOKUP_TRANSLATOR_TIMEOUT


def discover_config_files(app_dir: Path) -> list[Path]:
    """Return existing YAML files, lowest precedence first."""

    home = Path.home()
    candidates = [
        home / ".config" / APP_NAME / "config.yaml",
        home / f".{APP_NAME}.yaml",
        app_dir / f"{APP_NAME}.yaml",
    ]
    return [path for path in candidates if path.is_file()]


@lru_cache(maxsize=1)
def _load_settings(app_dir: Path | None = None) -> OidLookupConfig:
    """Load configuration layers once and cache the immutable model."""

    base_dir = app_dir or Path.cwd()
    combined = _load_discovered_yaml(app_dir=base_dir)
    _merge_env_sources(combined, app_dir=base_dir, schema=OidLookupConfig)

    try:
        return OidLookupConfig.model_validate(combined)
    except ValidationError as exc:
        issues = _format_validation_errors(exc.errors())
        raise ConfigurationError(issues) from exc


def _load_discovered_yaml(*, app_dir: Path) -> dict[str, Any]:
    """Merge every discovered YAML file into one mapping."""

    result: dict[str, Any] = {}
    for path in discover_config_files(app_dir):
        try:
            with path.open("r", encoding="utf-8") as handle:
                parsed = yaml.safe_load(handle)
        except OSError as exc:
            raise ConfigurationError(
                f"Configuration file {path} could not be read: {exc}"
            ) from exc
        except yaml.YAMLError as exc:
            raise ConfigurationError(
                f"Configuration file {path} is not valid YAML: {exc}"
            ) from exc
        if parsed is None:
            continue
        if not isinstance(parsed, Mapping):
            raise ConfigurationError(
                f"Invalid configuration file {path}: expected a mapping at the root."
            )
        result.update(parsed)
    return result


def _merge_env_sources(
    target: dict[str, Any],
    *,
    app_dir: Path,
    schema: type[BaseModel],
) -> None:
    """Merge .env and process environment variables into the target mapping."""

    allowed = set(schema.model_fields.keys())

    def merge_values(values: Mapping[str, Optional[str]]) -> None:
        for key, value in sorted(values.items()):
            if value is None:
                continue
            if key not in allowed:
                continue
            target[key] = value

    dotenv_path = app_dir / ".env"
    if dotenv_path.exists():
        merge_values(dotenv_values(dotenv_path))

    merge_values({k: v for k, v in os.environ.items() if isinstance(v, str)})


def _format_validation_errors(entries: Sequence[Any]) -> str:
    details: list[str] = []
    for entry in entries:
        path = entry.get("loc") or []
        if isinstance(path, (list, tuple)):
            location = ".".join(str(part) for part in path if part not in {None, ""})
        else:
            location = str(path)
        message = str(entry.get("msg") or "Invalid value")
        prefix = f"{location}: " if location else ""
        details.append(f"- {prefix}{message}")
    return "Configuration validation errors detected:\n" + "\n".join(details)


def get_settings(app_dir: Path | None = None) -> OidLookupConfig:
    """Return the validated settings, loading them on first use."""

    return _load_settings(app_dir=app_dir)


def reset_settings_cache() -> None:
    """Forget the cached settings so the next call reloads every layer."""

    _load_settings.cache_clear()
