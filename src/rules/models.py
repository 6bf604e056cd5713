import re
from typing import Literal

from pydantic import BaseModel, Field, field_validator

HEX_COLOR_PATTERN = re.compile(r"^#([0-9A-Fa-f]{3}|[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})$")

Level = Literal["AA", "AAA"]


class ProjectRules(BaseModel):
    slug: str
    rules_version: str

class AuditPairRule(BaseModel):
    name: str
    foreground: str
    background: str
    is_large_text: bool = False
    level: Level | None = None

class ContrastRules(BaseModel):
    range_policy: Literal["allow", "clamp", "reject"] = "allow"
    default_level: Level = "AA"
    palette: dict[str, str] = Field(default_factory=dict)
    audit_pairs: list[AuditPairRule] = Field(default_factory=list)

    @field_validator("palette")
    @classmethod
    def _palette_values_are_hex(cls, palette: dict[str, str]) -> dict[str, str]:
        bad = [name for name, value in palette.items() if not HEX_COLOR_PATTERN.match(value)]
        if bad:
            raise ValueError(f"palette entries must be hex colors: {', '.join(bad)}")
        return palette

class Rules(BaseModel):
    project: ProjectRules | None = None
    contrast: ContrastRules = Field(default_factory=ContrastRules)
