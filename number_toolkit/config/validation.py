"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_non_negative_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_formatting_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate formatting parameters."""
        errors = []

        for name in ("abbreviate_precision", "file_size_precision",
                     "percentage_decimals", "scientific_precision"):
            if name in params and not _is_non_negative_int(params[name]):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a non-negative integer",
                    value=params[name]
                ))

        for name in ("binary_sizes", "strip_trailing_zeros"):
            if name in params and not isinstance(params[name], bool):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a boolean",
                    value=params[name]
                ))

        return errors

    @staticmethod
    def validate_currency_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate currency parameters."""
        errors = []

        if "default_code" in params:
            value = params["default_code"]
            if not isinstance(value, str) or not value.strip():
                errors.append(ValidationError(
                    field="default_code",
                    message="Must be a non-empty currency code",
                    value=value
                ))

        if "default_locale" in params:
            value = params["default_locale"]
            if not isinstance(value, str) or not value.strip():
                errors.append(ValidationError(
                    field="default_locale",
                    message="Must be a non-empty locale name",
                    value=value
                ))

        if "decimals" in params and not _is_non_negative_int(params["decimals"]):
            errors.append(ValidationError(
                field="decimals",
                message="Must be a non-negative integer",
                value=params["decimals"]
            ))

        if "symbols" in params:
            value = params["symbols"]
            if not isinstance(value, dict) or not all(
                isinstance(k, str) and isinstance(v, str) for k, v in value.items()
            ):
                errors.append(ValidationError(
                    field="symbols",
                    message="Must map currency codes to symbol strings",
                    value=value
                ))

        if "prefix_locales" in params:
            value = params["prefix_locales"]
            if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
                errors.append(ValidationError(
                    field="prefix_locales",
                    message="Must be a list of locale prefixes",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_random_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate random generation parameters."""
        errors = []

        if "otp_digits" in params:
            value = params["otp_digits"]
            if not _is_non_negative_int(value) or value < 1:
                errors.append(ValidationError(
                    field="otp_digits",
                    message="Must be a positive integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_tolerance_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate tolerance parameters."""
        errors = []

        if "epsilon" in params:
            value = params["epsilon"]
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
                errors.append(ValidationError(
                    field="epsilon",
                    message="Must be a non-negative number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_statistics_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate statistics parameters."""
        errors = []

        if "population" in params and not isinstance(params["population"], bool):
            errors.append(ValidationError(
                field="population",
                message="Must be a boolean",
                value=params["population"]
            ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "formatting" in config:
            errors.extend(ConfigValidator.validate_formatting_params(config["formatting"]))

        if "currency" in config:
            errors.extend(ConfigValidator.validate_currency_params(config["currency"]))

        if "random" in config:
            errors.extend(ConfigValidator.validate_random_params(config["random"]))

        if "tolerance" in config:
            errors.extend(ConfigValidator.validate_tolerance_params(config["tolerance"]))

        if "statistics" in config:
            errors.extend(ConfigValidator.validate_statistics_params(config["statistics"]))

        return errors
