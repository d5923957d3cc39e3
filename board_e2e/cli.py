#!/usr/bin/env python3
"""Command runner for the board browser suite.

Usage:
    board-e2e <command> [extra pytest args...]

Each command maps to a fixed pytest (or Playwright) invocation; anything after
the command name is passed through. Runs write JUnit XML to
`BOARD_REPORT_DIR`, which `board-e2e report` summarizes.
"""
from __future__ import annotations

import argparse
import os
import subprocess
import sys
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from board_e2e.config import settings

TESTS_DIR = Path(__file__).resolve().parent / "tests"
WEB_APP_SUITE = TESTS_DIR / "test_web_app_suite.py"


class Colors:
    """ANSI color codes for terminal output."""
    RED = '\033[0;31m'
    GREEN = '\033[0;32m'
    YELLOW = '\033[1;33m'
    CYAN = '\033[0;36m'
    NC = '\033[0m'  # No Color


@dataclass(frozen=True)
class Command:
    description: str
    pytest_args: Tuple[str, ...] = ()
    env: Dict[str, str] = field(default_factory=dict)


COMMANDS: Dict[str, Command] = {
    "all": Command("Run every test", (str(TESTS_DIR),)),
    "ui": Command("Run the card and tag suite", (str(TESTS_DIR / "test_cards.py"),)),
    "api": Command("Run the API contract tests", (str(TESTS_DIR / "test_api.py"),)),
    "auth": Command("Run the user authentication tests", (str(WEB_APP_SUITE), "-k", "TestUserAuthentication")),
    "mobile": Command("Run the mobile navigation tests", (str(WEB_APP_SUITE), "-k", "TestMobileNavigation")),
    "design": Command("Run the design system tests", (str(WEB_APP_SUITE), "-k", "TestDesignSystem")),
    "payment": Command("Run the payment gateway tests", (str(WEB_APP_SUITE), "-k", "TestPaymentGateway")),
    "docs": Command("Run the API documentation tests", (str(WEB_APP_SUITE), "-k", "TestApiDocumentation")),
    "marketing": Command("Run the marketing landing page tests", (str(WEB_APP_SUITE), "-k", "TestMarketing")),
    "headed": Command("Run every test with a visible browser", (str(TESTS_DIR),), {"PLAYWRIGHT_HEADLESS": "false"}),
    "debug": Command(
        "Run every test under the Playwright inspector",
        (str(TESTS_DIR), "-s"),
        {"PLAYWRIGHT_HEADLESS": "false", "PWDEBUG": "1"},
    ),
}
EXTRA_COMMANDS = {
    "report": "Summarize the latest JUnit report",
    "install": "Install the Playwright browser",
    "help": "Show this help",
}


class UnknownCommandError(ValueError):
    pass


def usage() -> str:
    lines = ["Usage: board-e2e <command> [extra pytest args...]", "", "Commands:"]
    for name, command in COMMANDS.items():
        lines.append(f"  {name:<10} {command.description}")
    for name, description in EXTRA_COMMANDS.items():
        lines.append(f"  {name:<10} {description}")
    return "\n".join(lines)


def junit_path(report_dir: Path, name: str) -> Path:
    return report_dir / f"junit-{name}.xml"


def build_command(
    name: str,
    extra: Sequence[str] = (),
    report_dir: Optional[Path] = None,
    python: str = sys.executable,
) -> Tuple[List[str], Dict[str, str]]:
    """Return the argv and extra environment for a runnable command."""
    if name == "install":
        return [python, "-m", "playwright", "install", "chromium", *extra], {}
    command = COMMANDS.get(name)
    if command is None:
        raise UnknownCommandError(name)
    report_dir = report_dir if report_dir is not None else settings.report_dir
    argv = [python, "-m", "pytest", *command.pytest_args, f"--junitxml={junit_path(report_dir, name)}", *extra]
    return argv, dict(command.env)


@dataclass
class ReportSummary:
    path: Path
    total: int = 0
    failed: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    skipped: int = 0

    @property
    def passed(self) -> int:
        return self.total - len(self.failed) - len(self.errors) - self.skipped


def summarize_report(path: Path) -> ReportSummary:
    """Count outcomes per test case in a JUnit XML file."""
    summary = ReportSummary(path=path)
    root = ET.parse(path).getroot()
    for case in root.iter("testcase"):
        summary.total += 1
        test_id = f"{case.get('classname', '')}::{case.get('name', '')}"
        if case.find("failure") is not None:
            summary.failed.append(test_id)
        elif case.find("error") is not None:
            summary.errors.append(test_id)
        elif case.find("skipped") is not None:
            summary.skipped += 1
    return summary


def latest_report(report_dir: Path) -> Optional[Path]:
    reports = sorted(report_dir.glob("junit-*.xml"), key=lambda p: p.stat().st_mtime)
    return reports[-1] if reports else None


def show_report(report_dir: Path) -> int:
    path = latest_report(report_dir)
    if path is None:
        print(f"{Colors.YELLOW}No JUnit reports in {report_dir}; run a suite first.{Colors.NC}")
        return 1
    try:
        summary = summarize_report(path)
    except ET.ParseError as exc:
        print(f"{Colors.RED}Cannot parse {path}: {exc}{Colors.NC}")
        return 1

    print(f"{Colors.CYAN}Report: {summary.path}{Colors.NC}")
    print(f"  total={summary.total} passed={summary.passed} failed={len(summary.failed)} "
          f"errors={len(summary.errors)} skipped={summary.skipped}")
    for test_id in summary.failed:
        print(f"  {Colors.RED}FAILED{Colors.NC} {test_id}")
    for test_id in summary.errors:
        print(f"  {Colors.RED}ERROR{Colors.NC}  {test_id}")
    return 0


def run(name: str, extra: Sequence[str]) -> int:
    argv, env_updates = build_command(name, extra)
    if name != "install":
        settings.report_dir.mkdir(parents=True, exist_ok=True)
    env = {**os.environ, **env_updates}

    print(f"{Colors.CYAN}Running: {' '.join(argv)}{Colors.NC}")
    try:
        result = subprocess.run(argv, env=env, check=False)
    except KeyboardInterrupt:
        print(f"\n{Colors.YELLOW}Interrupted{Colors.NC}")
        return 0

    if result.returncode == 0:
        print(f"{Colors.GREEN}Command '{name}' passed{Colors.NC}")
        return 0
    print(f"{Colors.RED}Command '{name}' failed (exit {result.returncode}){Colors.NC}")
    return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="board-e2e", add_help=False, usage=argparse.SUPPRESS)
    parser.add_argument("command", nargs="?", default="help")
    parser.add_argument("extra", nargs=argparse.REMAINDER)
    argv = list(sys.argv[1:] if argv is None else argv)
    if argv and argv[0] in ("-h", "--help"):
        argv[0] = "help"
    args = parser.parse_args(argv)

    if args.command == "help":
        print(usage())
        return 0
    if args.command == "report":
        return show_report(settings.report_dir)
    if args.command not in COMMANDS and args.command != "install":
        print(f"{Colors.RED}Unknown command: {args.command}{Colors.NC}\n")
        print(usage())
        return 1
    return run(args.command, args.extra)


if __name__ == "__main__":
    raise SystemExit(main())
