from pathlib import Path

import pytest

from src.components.contrast import ContrastRulesAdapter
from src.rules.loader import load_rules

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def project_rules() -> ContrastRulesAdapter:
    """
    Rules port backed by the project's own rules.yaml.
    """
    rules_path = PROJECT_ROOT / "rules.yaml"
    if not rules_path.exists():
        raise FileNotFoundError(f"Rules not found at {rules_path}")

    return ContrastRulesAdapter(load_rules(rules_path))
