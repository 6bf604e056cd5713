"""
Contrast component - WCAG 2.1 contrast validation.

Refs: WCAG 2.1 §1.4.3 (AA), §1.4.6 (AAA), §1.4.11 (non-text contrast)

Resolves color references through a resolver port, applies the configured
range policy, and runs the pure calculator in _impl.

Invariants:
- I1: Contrast ratio is always >= 1.0
- I2: meets_aaa implies meets_aa for the same text size
- I3: Failures are reported as errors in outputs, never raised
"""

from __future__ import annotations

import logging

from ._impl import (
    DEFAULT_PALETTE,
    ContrastConfig,
    ContrastService,
    contrast_ratio,
    describe_failure,
    meets_ui_component_requirement,
    meets_wcag,
    required_ratio,
    validate,
)
from .adapters.resolvers import PaletteColorResolver
from .models import (
    AuditPaletteInput,
    AuditPaletteOutput,
    ContrastError,
    ContrastRatioInput,
    ContrastRatioOutput,
    MeetsWCAGInput,
    MeetsWCAGOutput,
    PairCheck,
    UIComponentInput,
    UIComponentOutput,
    ValidateContrastInput,
    ValidateContrastOutput,
    WCAGLevel,
)
from .ports import ColorResolverPort, RulesPort

logger = logging.getLogger(__name__)


def _build_config(rules: RulesPort | None) -> ContrastConfig:
    """Build contrast config from rules port."""
    if rules is None:
        return ContrastConfig()

    return ContrastConfig(
        range_policy=rules.get_range_policy(),
        default_level=rules.get_default_level(),
        audit_pairs=tuple(rules.get_audit_pairs()),
    )


def _create_service(
    resolver: ColorResolverPort | None,
    rules: RulesPort | None,
) -> ContrastService:
    """Create contrast service from ports."""
    if resolver is None:
        palette = rules.get_palette() if rules is not None else dict(DEFAULT_PALETTE)
        resolver = PaletteColorResolver(palette)

    return ContrastService(resolver=resolver, config=_build_config(rules))


# --- Component Entry Points ---


def run_ratio(
    inp: ContrastRatioInput,
    *,
    resolver: ColorResolverPort | None = None,
    rules: RulesPort | None = None,
) -> ContrastRatioOutput:
    """
    Compute the contrast ratio of a color pair.

    Args:
        inp: Input containing foreground and background references.
        resolver: Optional color resolver port (palette + hex by default).
        rules: Optional rules port for configuration.

    Returns:
        ContrastRatioOutput with the ratio or errors.
    """
    service = _create_service(resolver, rules)

    fg, bg, errors = service.resolve_pair(inp.foreground, inp.background)
    if fg is None or bg is None:
        return ContrastRatioOutput(ratio=None, errors=errors, success=False)

    return ContrastRatioOutput(ratio=contrast_ratio(fg, bg))


def run_validate(
    inp: ValidateContrastInput,
    *,
    resolver: ColorResolverPort | None = None,
    rules: RulesPort | None = None,
) -> ValidateContrastOutput:
    """
    Validate a color pair against WCAG AA and AAA.

    Args:
        inp: Input containing the pair and text size.
        resolver: Optional color resolver port.
        rules: Optional rules port for configuration.

    Returns:
        ValidateContrastOutput with a ValidationResult or errors.
    """
    service = _create_service(resolver, rules)

    fg, bg, errors = service.resolve_pair(inp.foreground, inp.background)
    if fg is None or bg is None:
        return ValidateContrastOutput(result=None, errors=errors, success=False)

    result = validate(fg, bg, inp.is_large_text)
    logger.debug(
        "Validated %s on %s: %s (AA=%s, AAA=%s)",
        fg,
        bg,
        result.ratio_description,
        result.meets_aa,
        result.meets_aaa,
    )

    return ValidateContrastOutput(result=result)


def run_meets_wcag(
    inp: MeetsWCAGInput,
    *,
    resolver: ColorResolverPort | None = None,
    rules: RulesPort | None = None,
) -> MeetsWCAGOutput:
    """
    Check a color pair against a single WCAG level.

    Args:
        inp: Input containing the pair, level and text size.
        resolver: Optional color resolver port.
        rules: Optional rules port for configuration.

    Returns:
        MeetsWCAGOutput with pass/fail, ratio and required ratio.
    """
    service = _create_service(resolver, rules)

    fg, bg, errors = service.resolve_pair(inp.foreground, inp.background)
    if fg is None or bg is None:
        return MeetsWCAGOutput(passes=False, errors=errors, success=False)

    level = WCAGLevel(inp.level)

    return MeetsWCAGOutput(
        passes=meets_wcag(fg, bg, level, inp.is_large_text),
        ratio=contrast_ratio(fg, bg),
        required=required_ratio(level, inp.is_large_text),
    )


def run_ui_component(
    inp: UIComponentInput,
    *,
    resolver: ColorResolverPort | None = None,
    rules: RulesPort | None = None,
) -> UIComponentOutput:
    """
    Check the non-text 3:1 requirement for icons, borders and controls.

    Args:
        inp: Input containing the component and background colors.
        resolver: Optional color resolver port.
        rules: Optional rules port for configuration.

    Returns:
        UIComponentOutput with pass/fail and ratio.
    """
    service = _create_service(resolver, rules)

    fg, bg, errors = service.resolve_pair(inp.foreground, inp.background)
    if fg is None or bg is None:
        return UIComponentOutput(passes=False, errors=errors, success=False)

    return UIComponentOutput(
        passes=meets_ui_component_requirement(fg, bg),
        ratio=contrast_ratio(fg, bg),
    )


def run_audit(
    inp: AuditPaletteInput,
    *,
    resolver: ColorResolverPort | None = None,
    rules: RulesPort | None = None,
) -> AuditPaletteOutput:
    """
    Audit named palette pairs.

    Pairs fail against their own level (or the configured default).
    Pairs that pass AA but not AAA produce a warning.

    Args:
        inp: Input with explicit pairs, or None to use configured pairs.
        resolver: Optional color resolver port.
        rules: Optional rules port for configuration.

    Returns:
        AuditPaletteOutput with per-pair checks, violations and warnings.
    """
    service = _create_service(resolver, rules)
    pairs = inp.pairs if inp.pairs is not None else service.config.audit_pairs

    checks: list[PairCheck] = []
    violations: list[str] = []
    warnings: list[str] = []
    errors: list[ContrastError] = []

    for pair in pairs:
        check, pair_errors = service.check_pair(pair)
        if check is None:
            errors.extend(pair_errors)
            continue

        checks.append(check)
        if not check.passes:
            violations.append(describe_failure(check))
        elif check.result.meets_aa and not check.result.meets_aaa:
            warnings.append(
                f"{check.name}: {check.result.ratio_description} meets AA but not AAA"
            )

    if not pairs:
        warnings.append("No pairs to audit")

    logger.info(
        "Audited %d pairs: %d violations, %d errors",
        len(pairs),
        len(violations),
        len(errors),
    )

    return AuditPaletteOutput(
        checks=tuple(checks),
        violations=violations,
        warnings=warnings,
        errors=errors,
        success=len(errors) == 0,
    )


def run(
    inp: (
        ContrastRatioInput
        | ValidateContrastInput
        | MeetsWCAGInput
        | UIComponentInput
        | AuditPaletteInput
    ),
    *,
    resolver: ColorResolverPort | None = None,
    rules: RulesPort | None = None,
) -> (
    ContrastRatioOutput
    | ValidateContrastOutput
    | MeetsWCAGOutput
    | UIComponentOutput
    | AuditPaletteOutput
):
    """
    Main entry point for the contrast component.

    Dispatches to appropriate handler based on input type.

    Args:
        inp: Input object determining the operation.
        resolver: Optional color resolver port.
        rules: Optional rules port for configuration.

    Returns:
        Appropriate output object based on input type.
    """
    if isinstance(inp, ContrastRatioInput):
        return run_ratio(inp, resolver=resolver, rules=rules)
    elif isinstance(inp, ValidateContrastInput):
        return run_validate(inp, resolver=resolver, rules=rules)
    elif isinstance(inp, MeetsWCAGInput):
        return run_meets_wcag(inp, resolver=resolver, rules=rules)
    elif isinstance(inp, UIComponentInput):
        return run_ui_component(inp, resolver=resolver, rules=rules)
    elif isinstance(inp, AuditPaletteInput):
        return run_audit(inp, resolver=resolver, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
