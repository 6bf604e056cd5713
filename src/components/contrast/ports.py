"""
Contrast component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from .models import AuditPair, RangePolicy, RGBColor, WCAGLevel


class ColorResolverPort(Protocol):
    """Turns a host color reference into an sRGB triple."""

    def resolve(self, ref: str) -> RGBColor | None:
        """Resolve a reference, or return None if it is unknown."""
        ...


class RulesPort(Protocol):
    """Port for contrast rules configuration."""

    def get_range_policy(self) -> RangePolicy:
        """Get the out-of-range channel policy."""
        ...

    def get_default_level(self) -> WCAGLevel:
        """Get the level used when a pair does not name one."""
        ...

    def get_palette(self) -> dict[str, str]:
        """Get palette token names mapped to hex colors."""
        ...

    def get_audit_pairs(self) -> list[AuditPair]:
        """Get the configured pairs to audit."""
        ...
