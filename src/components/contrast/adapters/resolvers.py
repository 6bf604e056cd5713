"""
Color resolver adapters for the contrast component.
"""

from __future__ import annotations

from collections.abc import Mapping

from src.components.contrast.models import HEX_COLOR_PATTERN, RGBColor


class HexColorResolver:
    """Resolves #RGB, #RRGGBB and #RRGGBBAA strings."""

    def resolve(self, ref: str) -> RGBColor | None:
        ref = ref.strip()
        if not HEX_COLOR_PATTERN.match(ref):
            return None
        return RGBColor.from_hex(ref)


class PaletteColorResolver:
    """
    Resolves named palette tokens, falling back to hex parsing.

    Token lookup is case-insensitive.
    """

    def __init__(
        self,
        palette: Mapping[str, str],
        fallback: HexColorResolver | None = None,
    ) -> None:
        self._fallback = fallback or HexColorResolver()
        self._palette: dict[str, RGBColor] = {}

        for name, value in palette.items():
            color = self._fallback.resolve(value)
            if color is None:
                raise ValueError(f"Palette token '{name}' has invalid color '{value}'")
            self._palette[name.lower()] = color

    def names(self) -> list[str]:
        """Token names in the palette."""
        return sorted(self._palette)

    def resolve(self, ref: str) -> RGBColor | None:
        color = self._palette.get(ref.strip().lower())
        if color is not None:
            return color
        return self._fallback.resolve(ref)
