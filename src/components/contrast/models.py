"""
Contrast component input/output models.

Refs: WCAG 2.1 §1.4.3, §1.4.6, §1.4.11
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

from src.rules.models import HEX_COLOR_PATTERN


# --- Color ---


@dataclass(frozen=True)
class RGBColor:
    """
    sRGB color with channels in [0.0, 1.0].

    Alpha is carried for display purposes only and is ignored by
    luminance calculations.
    """

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    @classmethod
    def from_rgb255(cls, red: int, green: int, blue: int, alpha: float = 1.0) -> RGBColor:
        """Build a color from 0-255 channel values."""
        return cls(red / 255, green / 255, blue / 255, alpha)

    @classmethod
    def from_hex(cls, hex_color: str) -> RGBColor:
        """
        Parse a hex color (#RGB, #RRGGBB or #RRGGBBAA).

        Raises:
            ValueError: If the string is not a valid hex color
        """
        if not HEX_COLOR_PATTERN.match(hex_color):
            raise ValueError(
                f"Invalid hex color format: {hex_color}. Expected #RGB, #RRGGBB or #RRGGBBAA"
            )

        digits = hex_color.lstrip("#")
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)

        alpha = int(digits[6:8], 16) / 255 if len(digits) == 8 else 1.0

        return cls.from_rgb255(
            int(digits[0:2], 16),
            int(digits[2:4], 16),
            int(digits[4:6], 16),
            alpha,
        )

    def channels(self) -> tuple[float, float, float]:
        """Return the (red, green, blue) triple."""
        return (self.red, self.green, self.blue)

    def to_hex(self) -> str:
        """Format as #RRGGBB, clamping channels into range. NaN maps to 00."""
        r, g, b = (
            0 if math.isnan(c) else round(min(max(c, 0.0), 1.0) * 255) for c in self.channels()
        )
        return f"#{r:02X}{g:02X}{b:02X}"


# A color reference as accepted at the component boundary:
# an RGBColor, a hex string, or a palette token name.
ColorRef = RGBColor | str


class WCAGLevel(str, Enum):
    """WCAG 2.1 conformance tier."""

    AA = "AA"
    AAA = "AAA"


class RangePolicy(str, Enum):
    """How out-of-range channel values are treated before calculation."""

    ALLOW = "allow"
    CLAMP = "clamp"
    REJECT = "reject"


# --- Validation Result ---


@dataclass(frozen=True)
class ValidationResult:
    """Contrast of a color pair against both WCAG tiers."""

    ratio: float
    meets_aa: bool
    meets_aaa: bool
    is_large_text: bool

    @property
    def ratio_description(self) -> str:
        """Human-readable ratio, e.g. '4.54:1'."""
        return f"{self.ratio:.2f}:1"


# --- Errors ---


@dataclass(frozen=True)
class ContrastError:
    """Contrast component error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class ContrastRatioInput:
    """Input for computing a contrast ratio."""

    foreground: ColorRef
    background: ColorRef


@dataclass(frozen=True)
class ValidateContrastInput:
    """Input for validating a pair against AA and AAA."""

    foreground: ColorRef
    background: ColorRef
    is_large_text: bool = False


@dataclass(frozen=True)
class MeetsWCAGInput:
    """Input for checking a pair against a single WCAG level."""

    foreground: ColorRef
    background: ColorRef
    level: WCAGLevel = WCAGLevel.AA
    is_large_text: bool = False


@dataclass(frozen=True)
class UIComponentInput:
    """Input for checking non-text UI component contrast."""

    foreground: ColorRef
    background: ColorRef


@dataclass(frozen=True)
class AuditPair:
    """A named foreground/background pair to audit."""

    name: str
    foreground: ColorRef
    background: ColorRef
    is_large_text: bool = False
    level: WCAGLevel | None = None


@dataclass(frozen=True)
class AuditPaletteInput:
    """Input for auditing palette pairs. Uses configured pairs when None."""

    pairs: tuple[AuditPair, ...] | None = None


# --- Output Models ---


@dataclass(frozen=True)
class ContrastRatioOutput:
    """Output for a contrast ratio computation."""

    ratio: float | None
    errors: list[ContrastError] = field(default_factory=list)
    success: bool = True

    @property
    def ratio_description(self) -> str | None:
        if self.ratio is None:
            return None
        return f"{self.ratio:.2f}:1"


@dataclass(frozen=True)
class ValidateContrastOutput:
    """Output for a pair validation."""

    result: ValidationResult | None
    errors: list[ContrastError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class MeetsWCAGOutput:
    """Output for a single-level WCAG check."""

    passes: bool
    ratio: float | None = None
    required: float | None = None
    errors: list[ContrastError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class UIComponentOutput:
    """Output for a UI component contrast check."""

    passes: bool
    ratio: float | None = None
    errors: list[ContrastError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class PairCheck:
    """Outcome of auditing one pair."""

    name: str
    foreground: RGBColor
    background: RGBColor
    level: WCAGLevel
    is_large_text: bool
    result: ValidationResult
    passes: bool


@dataclass(frozen=True)
class AuditPaletteOutput:
    """Output for a palette audit."""

    checks: tuple[PairCheck, ...] = ()
    violations: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    errors: list[ContrastError] = field(default_factory=list)
    success: bool = True

    @property
    def is_valid(self) -> bool:
        return self.success and not self.violations
