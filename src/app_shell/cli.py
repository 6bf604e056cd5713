import argparse
import logging
import sys
from pathlib import Path

from src.components.contrast import (
    AuditPaletteInput,
    ContrastRatioInput,
    ContrastRulesAdapter,
    ValidateContrastInput,
    run_audit,
    run_ratio,
    run_validate,
)
from src.components.contrast.models import ContrastError
from src.rules.loader import load_rules
from src.rules.models import Rules

logger = logging.getLogger("cli")

RULES_PATH = "rules.yaml"


def get_rules(path: str | None) -> ContrastRulesAdapter | None:
    """
    Load rules from an explicit path, or from ./rules.yaml if present.
    Returns None when the rules are invalid or an explicit file is missing.
    """
    rules_path = Path(path or RULES_PATH)

    if not rules_path.exists():
        if path is not None:
            logger.error(f"Rules file {rules_path} not found.")
            return None
        logger.debug("No %s found, using built-in defaults", RULES_PATH)
        return ContrastRulesAdapter(Rules())

    try:
        rules = load_rules(rules_path)
    except ValueError as e:
        logger.error(str(e))
        return None

    logger.debug("Rules loaded from %s", rules_path)
    return ContrastRulesAdapter(rules)


def _report_errors(errors: list[ContrastError]) -> None:
    for e in errors:
        logger.error(f"{e.field}: {e.message}" if e.field else e.message)


def handle_ratio(rules: ContrastRulesAdapter, args: argparse.Namespace) -> int:
    out = run_ratio(ContrastRatioInput(args.foreground, args.background), rules=rules)
    if not out.success:
        _report_errors(out.errors)
        return 1

    print(out.ratio_description)
    return 0


def handle_validate(rules: ContrastRulesAdapter, args: argparse.Namespace) -> int:
    inp = ValidateContrastInput(args.foreground, args.background, is_large_text=args.large)
    out = run_validate(inp, rules=rules)
    if out.result is None:
        _report_errors(out.errors)
        return 1

    result = out.result
    size = "large" if result.is_large_text else "normal"
    print(f"Contrast: {result.ratio_description} ({size} text)")
    print(f"  AA:  {'Pass' if result.meets_aa else 'Fail'}")
    print(f"  AAA: {'Pass' if result.meets_aaa else 'Fail'}")
    return 0 if result.meets_aa else 1


def handle_audit(rules: ContrastRulesAdapter, args: argparse.Namespace) -> int:
    out = run_audit(AuditPaletteInput(), rules=rules)
    _report_errors(out.errors)

    for check in out.checks:
        mark = "PASS" if check.passes else "FAIL"
        print(f"[{mark}] {check.name}: {check.result.ratio_description} ({check.level.value})")

    for w in out.warnings:
        logger.warning(w)
    for v in out.violations:
        print(f"  - {v}")

    return 0 if out.is_valid else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="contrast", description="WCAG 2.1 contrast checker")
    parser.add_argument("--rules", help=f"Path to rules file (default: {RULES_PATH})")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # ratio
    ratio_parser = subparsers.add_parser("ratio", help="Print the contrast ratio of two colors")
    ratio_parser.add_argument("foreground", help="Hex color or palette token")
    ratio_parser.add_argument("background", help="Hex color or palette token")

    # validate
    validate_parser = subparsers.add_parser("validate", help="Check a pair against AA and AAA")
    validate_parser.add_argument("foreground", help="Hex color or palette token")
    validate_parser.add_argument("background", help="Hex color or palette token")
    validate_parser.add_argument(
        "--large", action="store_true", help="Large text (>=18pt, or >=14pt bold)"
    )

    # audit
    audit_parser = subparsers.add_parser(
        "audit", help="Audit the palette pairs listed in the rules file"
    )
    audit_parser.add_argument(
        "--rules", default=argparse.SUPPRESS, help="Path to rules file to audit"
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    rules = get_rules(args.rules)
    if rules is None:
        return 1

    if args.command == "ratio":
        return handle_ratio(rules, args)
    elif args.command == "validate":
        return handle_validate(rules, args)
    elif args.command == "audit":
        return handle_audit(rules, args)

    parser.error(f"Unknown command: {args.command}")
    return 2


if __name__ == "__main__":
    sys.exit(main())
