"""
ContrastCalculator - WCAG 2.1 relative luminance and contrast ratio.

Source: https://www.w3.org/TR/WCAG21/#dfn-relative-luminance
        https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio

Key behaviors:
- Contrast ratio is symmetric and lies in [1, 21] for in-range colors
- AA requires 4.5:1 (normal) / 3:1 (large); AAA requires 7:1 / 4.5:1
- Non-text UI components require 3:1
- Calculations are pure; channel values are used as given unless a
  range policy says otherwise
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from types import MappingProxyType

from .models import (
    AuditPair,
    ColorRef,
    ContrastError,
    PairCheck,
    RangePolicy,
    RGBColor,
    ValidationResult,
    WCAGLevel,
)
from .ports import ColorResolverPort

logger = logging.getLogger(__name__)

# --- WCAG Constants ---

WCAG_AA_NORMAL_TEXT = 4.5
WCAG_AA_LARGE_TEXT = 3.0
WCAG_AAA_NORMAL_TEXT = 7.0
WCAG_AAA_LARGE_TEXT = 4.5
WCAG_UI_COMPONENTS = 3.0

# sRGB transfer function breakpoint as published in WCAG 2.1
LINEAR_THRESHOLD = 0.03928

LUMA_RED = 0.2126
LUMA_GREEN = 0.7152
LUMA_BLUE = 0.0722

LUMINANCE_OFFSET = 0.05

REQUIRED_RATIOS = MappingProxyType(
    {
        (WCAGLevel.AA, False): WCAG_AA_NORMAL_TEXT,
        (WCAGLevel.AA, True): WCAG_AA_LARGE_TEXT,
        (WCAGLevel.AAA, False): WCAG_AAA_NORMAL_TEXT,
        (WCAGLevel.AAA, True): WCAG_AAA_LARGE_TEXT,
    }
)


# --- Luminance ---


def linearize(channel: float) -> float:
    """Convert one sRGB-encoded channel to linear light."""
    if channel <= LINEAR_THRESHOLD:
        return channel / 12.92
    return float(((channel + 0.055) / 1.055) ** 2.4)


def relative_luminance(red: float, green: float, blue: float) -> float:
    """
    Calculate relative luminance per WCAG 2.1.

    Formula: L = 0.2126 * R + 0.7152 * G + 0.0722 * B
    Where R, G, B are linearized sRGB channels.

    Returns:
        0.0 for black through 1.0 for white
    """
    return (
        LUMA_RED * linearize(red)
        + LUMA_GREEN * linearize(green)
        + LUMA_BLUE * linearize(blue)
    )


def luminance_of(color: RGBColor) -> float:
    """Relative luminance of a color. Alpha is ignored."""
    return relative_luminance(*color.channels())


# --- Contrast Ratio ---


def contrast_ratio_from_luminance(luminance1: float, luminance2: float) -> float:
    """
    Calculate the contrast ratio of two luminance values.

    Argument order does not matter; the lighter value is always the numerator.
    """
    lighter = max(luminance1, luminance2)
    darker = min(luminance1, luminance2)
    return (lighter + LUMINANCE_OFFSET) / (darker + LUMINANCE_OFFSET)


def contrast_ratio(foreground: RGBColor, background: RGBColor) -> float:
    """
    Calculate WCAG contrast ratio between two colors.

    Returns:
        Contrast ratio (1.0 to 21.0)
    """
    return contrast_ratio_from_luminance(luminance_of(foreground), luminance_of(background))


# --- WCAG Validation ---


def required_ratio(level: WCAGLevel, is_large_text: bool) -> float:
    """Minimum contrast ratio for a WCAG level and text size."""
    return REQUIRED_RATIOS[(WCAGLevel(level), bool(is_large_text))]


def meets_wcag(
    foreground: RGBColor,
    background: RGBColor,
    level: WCAGLevel,
    is_large_text: bool = False,
) -> bool:
    """Check whether a pair meets the given WCAG level."""
    return contrast_ratio(foreground, background) >= required_ratio(level, is_large_text)


def validate(
    foreground: RGBColor,
    background: RGBColor,
    is_large_text: bool = False,
) -> ValidationResult:
    """
    Validate a pair against both AA and AAA.

    The ratio is computed once and compared to both thresholds.
    """
    ratio = contrast_ratio(foreground, background)
    return ValidationResult(
        ratio=ratio,
        meets_aa=ratio >= required_ratio(WCAGLevel.AA, is_large_text),
        meets_aaa=ratio >= required_ratio(WCAGLevel.AAA, is_large_text),
        is_large_text=is_large_text,
    )


def meets_ui_component_requirement(foreground: RGBColor, background: RGBColor) -> bool:
    """Check the 3:1 minimum for icons, borders and other graphical objects."""
    return contrast_ratio(foreground, background) >= WCAG_UI_COMPONENTS


# --- Range Policy ---


def _clamp01(value: float) -> float:
    if math.isnan(value):
        return 0.0
    return min(max(value, 0.0), 1.0)


def is_finite(color: RGBColor) -> bool:
    """True when no RGB channel is NaN or infinite."""
    return all(math.isfinite(c) for c in color.channels())


def is_in_range(color: RGBColor) -> bool:
    """True when every RGB channel is finite and lies in [0, 1]."""
    return is_finite(color) and all(0.0 <= c <= 1.0 for c in color.channels())


def apply_range_policy(
    color: RGBColor,
    policy: RangePolicy,
    field_name: str | None = None,
) -> tuple[RGBColor | None, list[ContrastError]]:
    """
    Apply the configured range policy to a color.

    Non-finite channels are errors under ALLOW and REJECT; CLAMP maps
    NaN to 0.0 and infinities to the nearest bound.

    Returns:
        Tuple of (color or None, errors)
    """
    if is_in_range(color):
        return color, []

    policy = RangePolicy(policy)

    if policy == RangePolicy.CLAMP:
        clamped = RGBColor(
            _clamp01(color.red),
            _clamp01(color.green),
            _clamp01(color.blue),
            color.alpha,
        )
        logger.warning("Clamped out-of-range color %s to %s", color.channels(), clamped.channels())
        return clamped, []

    if policy == RangePolicy.REJECT or not is_finite(color):
        return None, [
            ContrastError(
                code="channel_out_of_range",
                message=f"Color channels {color.channels()} must be within [0, 1]",
                field=field_name,
            )
        ]

    logger.debug("Using out-of-range color %s as given", color.channels())
    return color, []


# --- Configuration ---


DEFAULT_PALETTE = MappingProxyType(
    {
        "white": "#FFFFFF",
        "black": "#000000",
        "brand-burgundy": "#541311",
        "brand-gold": "#FFB42E",
        "brand-black": "#000000",
        "burgundy-light": "#8B2635",
        "burgundy-dark": "#B23850",
        "burgundy-high-contrast": "#9E2E3F",
    }
)


@dataclass(frozen=True)
class ContrastConfig:
    """Contrast configuration from rules."""

    range_policy: RangePolicy = RangePolicy.ALLOW
    default_level: WCAGLevel = WCAGLevel.AA
    audit_pairs: tuple[AuditPair, ...] = field(default_factory=tuple)


DEFAULT_CONFIG = ContrastConfig()


# --- Service ---


class ContrastService:
    """Resolves color references and runs contrast checks under a config."""

    def __init__(
        self,
        resolver: ColorResolverPort,
        config: ContrastConfig | None = None,
    ) -> None:
        self._resolver = resolver
        self._config = config or DEFAULT_CONFIG

    @property
    def config(self) -> ContrastConfig:
        return self._config

    def resolve(
        self, ref: ColorRef, field_name: str | None = None
    ) -> tuple[RGBColor | None, list[ContrastError]]:
        """Resolve a reference and apply the range policy."""
        color = ref if isinstance(ref, RGBColor) else self._resolver.resolve(ref)

        if color is None:
            return None, [
                ContrastError(
                    code="color_unresolved",
                    message=f"Cannot resolve color '{ref}'",
                    field=field_name,
                )
            ]

        return apply_range_policy(color, self._config.range_policy, field_name)

    def resolve_pair(
        self, foreground: ColorRef, background: ColorRef
    ) -> tuple[RGBColor | None, RGBColor | None, list[ContrastError]]:
        """Resolve both sides of a pair, collecting errors from each."""
        fg, fg_errors = self.resolve(foreground, "foreground")
        bg, bg_errors = self.resolve(background, "background")
        return fg, bg, fg_errors + bg_errors

    def check_pair(self, pair: AuditPair) -> tuple[PairCheck | None, list[ContrastError]]:
        """Audit a single named pair at its own (or the default) level."""
        fg, bg, errors = self.resolve_pair(pair.foreground, pair.background)
        if fg is None or bg is None:
            return None, [
                ContrastError(code=e.code, message=f"{pair.name}: {e.message}", field=e.field)
                for e in errors
            ]

        level = WCAGLevel(pair.level) if pair.level is not None else self._config.default_level
        result = validate(fg, bg, pair.is_large_text)
        passes = result.meets_aaa if level == WCAGLevel.AAA else result.meets_aa

        return (
            PairCheck(
                name=pair.name,
                foreground=fg,
                background=bg,
                level=level,
                is_large_text=pair.is_large_text,
                result=result,
                passes=passes,
            ),
            [],
        )


def describe_failure(check: PairCheck) -> str:
    """Violation message for a failing pair."""
    needed = required_ratio(check.level, check.is_large_text)
    size = "large" if check.is_large_text else "normal"
    return (
        f"{check.name}: {check.foreground.to_hex()} on {check.background.to_hex()} "
        f"is {check.result.ratio_description}, needs {needed}:1 "
        f"({check.level.value} {size} text)"
    )
