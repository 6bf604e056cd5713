"""
Rules adapter: exposes the contrast section of rules.yaml as a RulesPort.
"""

from __future__ import annotations

from src.components.contrast._impl import DEFAULT_PALETTE
from src.components.contrast.models import AuditPair, RangePolicy, WCAGLevel
from src.rules.models import ContrastRules, Rules


class ContrastRulesAdapter:
    """RulesPort backed by validated Rules."""

    def __init__(self, rules: Rules | ContrastRules | None = None) -> None:
        if isinstance(rules, Rules):
            rules = rules.contrast
        self._rules = rules or ContrastRules()

    def get_range_policy(self) -> RangePolicy:
        return RangePolicy(self._rules.range_policy)

    def get_default_level(self) -> WCAGLevel:
        return WCAGLevel(self._rules.default_level)

    def get_palette(self) -> dict[str, str]:
        """Configured palette layered over the built-in brand palette."""
        palette = dict(DEFAULT_PALETTE)
        palette.update(self._rules.palette)
        return palette

    def get_audit_pairs(self) -> list[AuditPair]:
        return [
            AuditPair(
                name=p.name,
                foreground=p.foreground,
                background=p.background,
                is_large_text=p.is_large_text,
                level=WCAGLevel(p.level) if p.level is not None else None,
            )
            for p in self._rules.audit_pairs
        ]
