"""Command-line entry point for the axe HTML fixer."""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

import structlog

from .config import get_settings
from .remediation import ReportParseError, load_report, remediate
from .reporting import generate_report
from .utils.logging import configure_logging, log_operation

logger = structlog.get_logger()


def fixed_path_for(html_path: Path, suffix: str = "_fixed") -> Path:
    """``page.html`` -> ``page_fixed.html`` in the same directory."""
    return html_path.with_name(f"{html_path.stem}{suffix}{html_path.suffix or '.html'}")


def run(
    html_path: str,
    report_path: str,
    output_path: Optional[str] = None,
    report_format: str = "json",
) -> int:
    """Remediate one file and write the fixed copy.

    Returns:
        Process exit code
    """
    settings = get_settings()
    html_file = Path(html_path)
    report_file = Path(report_path)

    for path in (html_file, report_file):
        if not path.is_file():
            print(f"Error: file not found at {path}", file=sys.stderr)
            return 1

    try:
        report = load_report(report_file.read_text(encoding="utf-8"))
    except ReportParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    with log_operation("remediate", logger, file=html_file.name) as op:
        result = remediate(
            html_file.read_text(encoding="utf-8"),
            report,
            html_file.name,
            settings,
        )
        op["changes"] = len(result.changes_required)
        op["not_found"] = len(result.not_found)

    fixed_file = Path(output_path) if output_path else fixed_path_for(html_file, settings.fixed_file_suffix)
    fixed_file.parent.mkdir(parents=True, exist_ok=True)
    fixed_file.write_text(result.updated_content, encoding="utf-8")
    logger.info("Fixed HTML saved", path=str(fixed_file))

    if report_format == "markdown":
        print(generate_report(report, result))
    else:
        print("Elements not found in HTML:", json.dumps([n.to_dict() for n in result.not_found], indent=2))
        print(result.to_json())
    print(f"Fixed HTML saved to: {fixed_file}")
    return 0


def cli():
    """Command-line interface."""
    parser = argparse.ArgumentParser(
        description="Apply an axe DevTools report to an HTML page"
    )
    parser.add_argument(
        "html",
        help="Path to the HTML page"
    )
    parser.add_argument(
        "report",
        help="Path to the axe JSON report"
    )
    parser.add_argument(
        "--output", "-o",
        help="Where to write the fixed HTML (default: <name>_fixed.html next to the input)"
    )
    parser.add_argument(
        "--report-format", "-f",
        choices=["json", "markdown"],
        default="json",
        help="Format of the result printed to stdout (default: json)"
    )
    parser.add_argument(
        "--log-level",
        help="Override AXE_FIXER_LOG_LEVEL"
    )

    args = parser.parse_args()

    settings = get_settings()
    configure_logging(args.log_level or settings.log_level, json_format=settings.log_json)

    sys.exit(run(
        html_path=args.html,
        report_path=args.report,
        output_path=args.output,
        report_format=args.report_format,
    ))


if __name__ == "__main__":
    cli()
