"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

import yaml

from number_toolkit.errors import InvalidArgumentError
from number_toolkit.logging import get_logger

from .defaults import (
    CurrencyParams,
    DefaultConfig,
    FormattingParams,
    RandomParams,
    StatisticsParams,
    ToleranceParams,
    get_default_config,
)
from .validation import ConfigValidator

logger = get_logger(__name__)

_SECTIONS = {
    "formatting": FormattingParams,
    "currency": CurrencyParams,
    "random": RandomParams,
    "tolerance": ToleranceParams,
    "statistics": StatisticsParams,
}


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent

        return cls(
            config_dir=config_dir,
            defaults=get_default_config(),
        )

    def load_profile(self, profile: str) -> dict[str, Any]:
        """Load a named profile's overrides from profiles.yaml."""
        profiles_file = self.config_dir / "profiles.yaml"

        if not profiles_file.exists():
            logger.debug("No profiles file found", path=str(profiles_file))
            return {}

        with open(profiles_file, encoding="utf-8") as f:
            profiles_config = yaml.safe_load(f) or {}

        overrides = profiles_config.get("profiles", {}).get(profile, {})
        logger.info("Loaded configuration profile", profile=profile, found=bool(overrides))
        return overrides  # type: ignore[no-any-return]

    def merge_config(
        self,
        profile: Optional[str] = None,
        overrides: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Call-site overrides (highest priority)
        2. Named profile from profiles.yaml
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        if profile:
            config = self._deep_merge(config, self.load_profile(profile))

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def build_config(
        self,
        profile: Optional[str] = None,
        overrides: Optional[dict[str, Any]] = None
    ) -> DefaultConfig:
        """
        Merge, validate and rebuild a DefaultConfig.

        Raises:
            InvalidArgumentError: If the merged configuration fails validation
        """
        merged = self.merge_config(profile, overrides)

        errors = ConfigValidator.validate_config(merged)
        if errors:
            logger.warning(
                "Configuration rejected",
                profile=profile,
                errors=[f"{e.field}: {e.message}" for e in errors],
            )
            first = errors[0]
            raise InvalidArgumentError(
                f"Invalid configuration value for {first.field}: {first.message}",
                argument=first.field,
                value=first.value,
                context={"errors": errors},
            )

        sections = {}
        for name, params_cls in _SECTIONS.items():
            known = {f.name for f in fields(params_cls)}
            values = {k: v for k, v in merged.get(name, {}).items() if k in known}
            if "prefix_locales" in values:
                values["prefix_locales"] = tuple(values["prefix_locales"])
            sections[name] = params_cls(**values)

        return DefaultConfig(**sections)

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                elif isinstance(value, dict):
                    result[field_name] = dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
