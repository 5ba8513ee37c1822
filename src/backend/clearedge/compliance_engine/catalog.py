from __future__ import annotations

import argparse
import json
from typing import Any, List

from pydantic import BaseModel

from .context import InvoiceContext
from .models import Severity
from .registry import registry

# Ensure built-in rules are imported/registered when generating a catalog.
from . import rules as _builtin_rules  # noqa: F401


class RuleCatalogEntry(BaseModel):
    code: str
    severity: Severity
    message: str
    fix: str

    module: str
    class_name: str


def build_catalog() -> List[RuleCatalogEntry]:
    # Evaluation order, not alphabetical: the order is part of the report contract.
    entries: List[RuleCatalogEntry] = []
    for code in registry.codes():
        rule_cls = registry.get(code)
        rule = rule_cls()
        entries.append(
            RuleCatalogEntry(
                code=code,
                severity=rule_cls.severity,
                message=rule.describe(InvoiceContext()),
                fix=rule.fix,
                module=getattr(rule_cls, "__module__", ""),
                class_name=getattr(rule_cls, "__name__", ""),
            )
        )
    return entries


def _dump_json(catalog: list[dict[str, Any]]) -> str:
    return json.dumps(catalog, indent=2, ensure_ascii=False)


def _dump_yaml(catalog: list[dict[str, Any]]) -> str:
    import yaml

    return yaml.safe_dump(catalog, sort_keys=False, allow_unicode=True)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Print the invoice rule catalog from the registry.")
    parser.add_argument(
        "--format",
        choices=("yaml", "json"),
        default="yaml",
        help="Output format (default: yaml).",
    )
    args = parser.parse_args(argv)

    catalog = [e.model_dump(mode="json") for e in build_catalog()]
    if args.format == "json":
        print(_dump_json(catalog))
    else:
        print(_dump_yaml(catalog))


if __name__ == "__main__":
    main()
