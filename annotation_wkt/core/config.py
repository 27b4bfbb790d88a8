"""Codec configuration loaded from environment variables.

All configuration values have defaults matching the strict WGS 84
policy: latitude is clamped to ±90 and longitude is written as given.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if any value is out
    of its valid range, so a bad deployment setting is caught at startup
    instead of silently distorting every polygon.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from annotation_wkt.core.constants import MAX_LATITUDE
from annotation_wkt.core.exceptions import GeometryError

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off", ""})


class ConfigValidationError(GeometryError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        message: Human-readable description of the valid range.
    """

    default_operation = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class GeometryConfig:
    """Immutable codec configuration.

    Loaded once by the caller and passed to the decoder / encoder entry
    points as ``config=``.

    Attributes:
        max_latitude: Decoded latitudes are clamped to
            ``[-max_latitude, max_latitude]``. Use
            ``WEB_MERCATOR_MAX_LATITUDE`` for Web Mercator map widgets.
        wrap_longitude: Wrap encoded longitudes into ``[-180, 180]``.
    """

    max_latitude: float = MAX_LATITUDE
    wrap_longitude: bool = False

    @classmethod
    def from_env(cls) -> GeometryConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a value is out of range or a boolean
                flag is not recognised.
            ValueError: If ``WKT_MAX_LATITUDE`` cannot be parsed as a float.
        """
        config = cls(
            max_latitude=float(os.getenv("WKT_MAX_LATITUDE", str(MAX_LATITUDE))),
            wrap_longitude=_parse_bool("WKT_WRAP_LONGITUDE", os.getenv("WKT_WRAP_LONGITUDE", "")),
        )
        _validate(config)
        return config


DEFAULT_CONFIG = GeometryConfig()


def _parse_bool(key: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigValidationError(key, raw, "must be a boolean (true/false, 1/0, yes/no, on/off)")


def _validate(config: GeometryConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if not 0.0 < config.max_latitude <= MAX_LATITUDE:
        raise ConfigValidationError(
            "WKT_MAX_LATITUDE",
            config.max_latitude,
            f"must be > 0 and <= {MAX_LATITUDE:g} (degrees)",
        )
