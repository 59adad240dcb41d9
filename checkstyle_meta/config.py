from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
import os
from pathlib import Path
import tomllib
from typing import cast
import warnings

from .constants import Defaults, EnvVars

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass(frozen=True, slots=True)
class MetaConfig:
    resources_dir: Path = field(default_factory=lambda: Path(Defaults.RESOURCES_DIR))
    os_name: str | None = None
    fail_fast: bool = Defaults.FAIL_FAST

    def __post_init__(self) -> None:
        if self.os_name is not None and not self.os_name.strip():
            raise ValueError("os_name must not be blank when set")

    def resolved_resources_dir(self) -> Path:
        """Return the resources directory, anchored at the current cwd."""
        if self.resources_dir.is_absolute():
            return self.resources_dir
        return Path.cwd() / self.resources_dir

    @classmethod
    def from_env(cls) -> MetaConfig:
        raw_os_name = os.getenv(EnvVars.OS_NAME)
        os_name = raw_os_name.strip() if raw_os_name else None
        return cls(
            resources_dir=Path(
                os.getenv(EnvVars.RESOURCES_DIR, Defaults.RESOURCES_DIR)
            ),
            os_name=os_name or None,
            fail_fast=_coerce_bool(
                os.getenv(EnvVars.FAIL_FAST, str(Defaults.FAIL_FAST)),
                key=EnvVars.FAIL_FAST,
            ),
        )


class ConfigLoader:
    pass

    @staticmethod
    def load(config_file: Path | None = None) -> MetaConfig:
        config = MetaConfig.from_env()
        if config_file is None:
            config_file = Path(Defaults.CONFIG_FILE)
        if config_file.exists():
            try:
                config = ConfigLoader._load_from_toml(config_file, config)
            except (OSError, tomllib.TOMLDecodeError, ValueError) as e:
                warnings.warn(
                    f"Failed to load config from {config_file}: {e}", stacklevel=2
                )
        return config

    @staticmethod
    def _load_from_toml(config_file: Path, base_config: MetaConfig) -> MetaConfig:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
        paths = _get_table(data, "paths")
        generation = _get_table(data, "generation")
        resources_dir = base_config.resources_dir
        if value := paths.get("resources_dir"):
            resources_dir = Path(str(value))
        os_name = base_config.os_name
        if "os_name" in generation:
            raw = generation.get("os_name")
            cleaned = str(raw).strip() if raw is not None else ""
            os_name = cleaned or None
        fail_fast = base_config.fail_fast
        if (value := generation.get("fail_fast")) is not None:
            fail_fast = _coerce_bool(value, key="generation.fail_fast")
        return MetaConfig(
            resources_dir=resources_dir,
            os_name=os_name,
            fail_fast=fail_fast,
        )


def _get_table(data: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = data.get(key)
    if isinstance(value, Mapping):
        return cast("Mapping[str, object]", value)
    return {}


def _coerce_bool(value: object, *, key: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
    raise ValueError(f"{key} must be a boolean, got {value!r}")
