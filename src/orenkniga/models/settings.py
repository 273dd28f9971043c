"""Reader display preferences.

Every numeric field is clamped into its range on validation, so a
``ReaderSettings`` instance can never hold an out-of-range value. Values
outside the range are pulled to the nearest bound instead of being rejected.
Unknown font families and themes fall back to the field default.

Settings only affect presentation. Pagination never depends on them.
"""

import logging
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

log = logging.getLogger(__name__)

FONT_SIZE_RANGE = (12, 28)
LINE_HEIGHT_RANGE = (1.2, 2.2)
MARGINS_RANGE = (8, 32)

# Slider steps used by the settings panel
FONT_SIZE_STEP = 1
LINE_HEIGHT_STEP = 0.1
MARGINS_STEP = 2


class FontFamily(str, Enum):
    """Typeface used for page text."""

    DEFAULT = "default"
    SERIF = "serif"


class Theme(str, Enum):
    """Reader colour theme."""

    LIGHT = "light"
    DARK = "dark"
    SEPIA = "sepia"


# Values written by older clients
_LEGACY_FONT_FAMILIES = {"inter": FontFamily.DEFAULT, "sans-serif": FontFamily.DEFAULT}


def clamp(value: float, low: float, high: float) -> float:
    """Constrain value to the closed range [low, high]."""
    return max(low, min(high, value))


def _as_number(value: object) -> float:
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise ValueError(f"expected a number, got {value!r}") from None


class ReaderSettings(BaseModel):
    """Display preferences for the reader."""

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    font_size: int = Field(default=18, alias="fontSize")
    line_height: float = Field(default=1.6, alias="lineHeight")
    margins: int = 16
    font_family: FontFamily = Field(default=FontFamily.DEFAULT, alias="fontFamily")
    theme: Theme = Theme.LIGHT

    @field_validator("font_size", mode="before")
    @classmethod
    def _clamp_font_size(cls, value: object) -> int:
        return int(round(clamp(_as_number(value), *FONT_SIZE_RANGE)))

    @field_validator("line_height", mode="before")
    @classmethod
    def _clamp_line_height(cls, value: object) -> float:
        return round(clamp(_as_number(value), *LINE_HEIGHT_RANGE), 2)

    @field_validator("margins", mode="before")
    @classmethod
    def _clamp_margins(cls, value: object) -> int:
        return int(round(clamp(_as_number(value), *MARGINS_RANGE)))

    @field_validator("font_family", mode="before")
    @classmethod
    def _coerce_font_family(cls, value: object) -> FontFamily:
        if isinstance(value, str) and value.lower() in _LEGACY_FONT_FAMILIES:
            return _LEGACY_FONT_FAMILIES[value.lower()]
        try:
            return FontFamily(value)
        except ValueError:
            log.warning("Unknown font family %r, using default", value)
            return FontFamily.DEFAULT

    @field_validator("theme", mode="before")
    @classmethod
    def _coerce_theme(cls, value: object) -> Theme:
        try:
            return Theme(value)
        except ValueError:
            log.warning("Unknown theme %r, using light", value)
            return Theme.LIGHT

    def to_storage(self) -> str:
        """Serialize using the camelCase keys of the persisted blob."""
        return self.model_dump_json(by_alias=True)
