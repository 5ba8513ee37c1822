from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path


def _ensure_backend_on_path() -> None:
    backend_dir = Path(__file__).resolve().parents[1]
    if str(backend_dir) not in sys.path:
        sys.path.insert(0, str(backend_dir))


_ensure_backend_on_path()

from adapters.invoice_files import (  # noqa: E402
    check_invoice_file,
    render_markdown,
    run_self_checks,
    sample_invoice,
)
from clearedge.compliance_engine import InvoiceReport, Level, validate_invoice  # noqa: E402

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "INVOICE_CHECK_LOG_LEVEL"


def _configure_logging() -> None:
    level_name = os.getenv(LOG_LEVEL_ENV, "WARNING").strip().upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def _render(report: InvoiceReport, fmt: str) -> str:
    if fmt == "markdown":
        return render_markdown(report)
    return json.dumps(report.model_dump(mode="json", by_alias=True), indent=2, ensure_ascii=False)


def _emit(text: str, output: Path | None) -> None:
    if output is None:
        print(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text + "\n", encoding="utf-8")
    logger.info("Wrote %s", output)


def _run_self_check() -> int:
    results = run_self_checks()
    passed = sum(1 for r in results if r.passed)
    for result in results:
        mark = "PASS" if result.passed else "FAIL"
        print(f"[{mark}] {result.name}: {result.details}")
    print(f"{passed}/{len(results)} passed")
    return 0 if passed == len(results) else 1


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Check an invoice (JSON or single-row CSV) against the compliance rules and print the report."
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("path", nargs="?", help="Path to a .json or .csv invoice file.")
    source.add_argument("--sample", action="store_true", help="Validate the built-in sample invoice.")
    source.add_argument(
        "--self-check",
        action="store_true",
        help="Run the smoke checks against the sample fixtures and exit.",
    )
    parser.add_argument(
        "--format",
        choices=("json", "markdown"),
        default="json",
        help="Report format (default: json).",
    )
    parser.add_argument("--output", default=None, help="Write the report to this file instead of stdout.")
    args = parser.parse_args(argv)

    _configure_logging()

    if args.self_check:
        return _run_self_check()

    if args.sample:
        report = validate_invoice(sample_invoice())
    else:
        report = check_invoice_file(Path(args.path))

    output = Path(args.output).resolve() if args.output else None
    _emit(_render(report, args.format), output)
    return 1 if report.level == Level.RED else 0


if __name__ == "__main__":
    raise SystemExit(main())
