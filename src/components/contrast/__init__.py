"""
Contrast component - WCAG 2.1 contrast ratio calculation and validation.
"""

from ._impl import (
    DEFAULT_PALETTE,
    REQUIRED_RATIOS,
    WCAG_AA_LARGE_TEXT,
    WCAG_AA_NORMAL_TEXT,
    WCAG_AAA_LARGE_TEXT,
    WCAG_AAA_NORMAL_TEXT,
    WCAG_UI_COMPONENTS,
    ContrastConfig,
    ContrastService,
    apply_range_policy,
    contrast_ratio,
    contrast_ratio_from_luminance,
    linearize,
    luminance_of,
    meets_ui_component_requirement,
    meets_wcag,
    relative_luminance,
    required_ratio,
    validate,
)
from .adapters import ContrastRulesAdapter, HexColorResolver, PaletteColorResolver
from .component import (
    run,
    run_audit,
    run_meets_wcag,
    run_ratio,
    run_ui_component,
    run_validate,
)
from .models import (
    AuditPair,
    AuditPaletteInput,
    AuditPaletteOutput,
    ContrastError,
    ContrastRatioInput,
    ContrastRatioOutput,
    MeetsWCAGInput,
    MeetsWCAGOutput,
    PairCheck,
    RangePolicy,
    RGBColor,
    UIComponentInput,
    UIComponentOutput,
    ValidateContrastInput,
    ValidateContrastOutput,
    ValidationResult,
    WCAGLevel,
)
from .ports import ColorResolverPort, RulesPort

__all__ = [
    # Entry points
    "run",
    "run_audit",
    "run_meets_wcag",
    "run_ratio",
    "run_ui_component",
    "run_validate",
    # Input models
    "AuditPair",
    "AuditPaletteInput",
    "ContrastRatioInput",
    "MeetsWCAGInput",
    "UIComponentInput",
    "ValidateContrastInput",
    # Output models
    "AuditPaletteOutput",
    "ContrastError",
    "ContrastRatioOutput",
    "MeetsWCAGOutput",
    "PairCheck",
    "UIComponentOutput",
    "ValidateContrastOutput",
    "ValidationResult",
    # Value types
    "RGBColor",
    "RangePolicy",
    "WCAGLevel",
    # Ports
    "ColorResolverPort",
    "RulesPort",
    # Adapters
    "ContrastRulesAdapter",
    "HexColorResolver",
    "PaletteColorResolver",
    # Calculator
    "ContrastConfig",
    "ContrastService",
    "DEFAULT_PALETTE",
    "REQUIRED_RATIOS",
    "WCAG_AA_LARGE_TEXT",
    "WCAG_AA_NORMAL_TEXT",
    "WCAG_AAA_LARGE_TEXT",
    "WCAG_AAA_NORMAL_TEXT",
    "WCAG_UI_COMPONENTS",
    "apply_range_policy",
    "contrast_ratio",
    "contrast_ratio_from_luminance",
    "linearize",
    "luminance_of",
    "meets_ui_component_requirement",
    "meets_wcag",
    "relative_luminance",
    "required_ratio",
    "validate",
]
