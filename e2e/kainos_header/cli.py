from __future__ import annotations

import argparse
import os
import sys
import webbrowser
from pathlib import Path
from typing import List, Optional

import pytest
from dotenv import load_dotenv

from kainos_header.core.settings import load_settings

E2E_DIR = Path(__file__).resolve().parents[1]
TESTS_DIR = E2E_DIR / "tests"
BDD_SUITE = TESTS_DIR / "test_header_bdd.py"
DIRECT_SUITE = TESTS_DIR / "test_header_direct.py"

COMMANDS = ("run", "headed", "direct", "report")

HTML_REPORT = "header-report.html"
JSON_REPORT = "cucumber-report.json"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kainos-header",
        description="Run the kainos.com header suites.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("run", help="Gherkin suite (headless unless HEADLESS=false)")
    sub.add_parser("headed", help="Gherkin suite with a visible browser")
    sub.add_parser("direct", help="plain pytest suite")

    report = sub.add_parser("report", help="Gherkin suite with HTML and cucumber JSON reports")
    report.add_argument("--report-dir", default=None, help="output directory (default: REPORT_DIR or reports)")
    report.add_argument("--no-open", action="store_true", help="do not open the HTML report")

    return parser


def report_paths(report_dir: Path) -> tuple[Path, Path]:
    return report_dir / HTML_REPORT, report_dir / JSON_REPORT


def build_pytest_args(command: str, report_dir: Optional[Path] = None, extra: Optional[List[str]] = None) -> List[str]:
    if command not in COMMANDS:
        raise ValueError(f"Unknown command: {command}")

    suite = DIRECT_SUITE if command == "direct" else BDD_SUITE
    args = [str(suite), "--e2e"]

    if command == "report":
        html, cucumber = report_paths(report_dir or Path("reports"))
        args += [
            f"--html={html}",
            "--self-contained-html",
            f"--cucumberjson={cucumber}",
        ]

    return args + list(extra or [])


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    # 知らない引数はそのまま pytest に渡す
    ns, extra = build_parser().parse_known_args(argv)
    if extra[:1] == ["--"]:
        extra = extra[1:]

    if ns.command == "headed":
        os.environ["HEADLESS"] = "false"

    report_dir = None
    if ns.command == "report":
        report_dir = Path(ns.report_dir or load_settings().report_dir)
        report_dir.mkdir(parents=True, exist_ok=True)

    code = int(pytest.main(build_pytest_args(ns.command, report_dir, extra)))

    if ns.command == "report" and not ns.no_open:
        html, _ = report_paths(report_dir)
        if html.exists():
            webbrowser.open(html.resolve().as_uri())
    return code


if __name__ == "__main__":
    sys.exit(main())
