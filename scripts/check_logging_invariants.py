#!/usr/bin/env python3
"""Lint the logdorak package for logging invariants.

Rules:
    NO_PRINT        print() in library code
    BARE_EXCEPT     bare ``except:`` whose body never logs
    DIRECT_BACKEND  structlog.get_logger() / logging.getLogger() outside
                    the backend modules
    UNPARSEABLE     file could not be read or parsed

Usage:
    python scripts/check_logging_invariants.py [--root DIR] [-v] [--fix]

Exits 1 when any rule is violated.
"""

import argparse
import ast
import sys
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional

CHECK_DIRS = ["logdorak"]

# Directory names never linted
SKIP_DIRS = {"tests", "scripts", "__pycache__"}

# The only files allowed to obtain backend loggers directly
BACKEND_ALLOWED_FILES = {
    "logdorak/backends/structlog_backend.py",
    "logdorak/backends/stdlib.py",
}

# (module, function) pairs that hand out backend loggers
BACKEND_LOGGER_CALLS = {
    ("structlog", "get_logger"),
    ("structlog", "getLogger"),
    ("logging", "getLogger"),
}

LOGGING_METHODS = {"trace", "debug", "info", "warn", "warning", "error"}

# Shown with --fix, one hint per rule
FIX_HINTS = {
    "NO_PRINT": 'LOGGER.info("loaded ", count, " rows") instead of print(...)',
    "BARE_EXCEPT": 'catch specific types and LOGGER.error("failed: ", detail, exc)',
    "DIRECT_BACKEND": "LOGGER = logdorak.Logger(__name__)",
    "UNPARSEABLE": "fix the syntax error, the file was not checked",
}


@dataclass
class Violation:
    file: Path
    line: int
    rule: str
    message: str
    snippet: str = ""

    def __str__(self) -> str:
        return f"{self.file}:{self.line}: [{self.rule}] {self.message}\n  {self.snippet}"


class LoggingInvariantChecker:
    """Walks one file's AST and collects Violations."""

    def __init__(self, filepath: Path, root: Optional[Path] = None):
        self.filepath = filepath
        self.root = root or Path.cwd()
        self.violations: List[Violation] = []
        self._lines: List[str] = []

    def check(self) -> List[Violation]:
        try:
            content = self.filepath.read_text(encoding="utf-8")
            tree = ast.parse(content, filename=str(self.filepath))
        except (OSError, SyntaxError, UnicodeDecodeError) as e:
            self._add(getattr(e, "lineno", None) or 0, "UNPARSEABLE", f"{type(e).__name__}: {e}")
            return self.violations

        self._lines = content.split("\n")
        backend_allowed = self._relative_path() in BACKEND_ALLOWED_FILES
        for node in ast.walk(tree):
            if isinstance(node, ast.ExceptHandler) and node.type is None:
                if not _logs_anything(node.body):
                    self._add(node.lineno, "BARE_EXCEPT", "bare except: that never logs")
            elif isinstance(node, ast.Call):
                func = node.func
                if isinstance(func, ast.Name) and func.id == "print":
                    self._add(node.lineno, "NO_PRINT", "print() in library code")
                elif (
                    not backend_allowed
                    and isinstance(func, ast.Attribute)
                    and isinstance(func.value, ast.Name)
                    and (func.value.id, func.attr) in BACKEND_LOGGER_CALLS
                ):
                    self._add(
                        node.lineno,
                        "DIRECT_BACKEND",
                        f"{func.value.id}.{func.attr}() outside backend modules",
                    )

        self.violations.sort(key=lambda v: v.line)
        return self.violations

    def _add(self, line: int, rule: str, message: str) -> None:
        snippet = self._lines[line - 1].strip() if 0 < line <= len(self._lines) else ""
        self.violations.append(Violation(self.filepath, line, rule, message, snippet))

    def _relative_path(self) -> str:
        try:
            return self.filepath.resolve().relative_to(self.root.resolve()).as_posix()
        except ValueError:
            return self.filepath.as_posix()


def _logs_anything(body: List[ast.stmt]) -> bool:
    return any(
        isinstance(node, ast.Call)
        and isinstance(node.func, ast.Attribute)
        and node.func.attr in LOGGING_METHODS
        for stmt in body
        for node in ast.walk(stmt)
    )


def iter_library_files(root: Path, check_dirs: List[str] = CHECK_DIRS) -> Iterator[Path]:
    """Yield the .py files under each checked directory, minus tests and scripts."""
    for dir_name in check_dirs:
        base = root / dir_name
        if not base.is_dir():
            continue
        for path in sorted(base.rglob("*.py")):
            relative_parts = path.relative_to(base).parts
            if SKIP_DIRS.intersection(relative_parts[:-1]):
                continue
            if path.name.startswith("test_") or path.name == "conftest.py":
                continue
            yield path


def collect_violations(root: Path, check_dirs: List[str] = CHECK_DIRS) -> List[Violation]:
    violations: List[Violation] = []
    for path in iter_library_files(root, check_dirs):
        violations.extend(LoggingInvariantChecker(path, root).check())
    return violations


def format_report(violations: List[Violation], verbose: bool = False, fix: bool = False) -> str:
    """One line per rule with its count, plus details on request."""
    counts = Counter(v.rule for v in violations)
    lines = [f"{rule}: {counts[rule]}" for rule in sorted(counts)]
    if verbose:
        lines.extend(str(v) for v in violations)
    if fix:
        lines.extend(f"fix {rule}: {FIX_HINTS[rule]}" for rule in sorted(counts))
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Check logdorak logging invariants")
    parser.add_argument("--fix", action="store_true", help="Show a fix hint per violated rule")
    parser.add_argument("--verbose", "-v", action="store_true", help="List every violation")
    parser.add_argument("--root", type=Path, default=Path.cwd(), help="Project root")
    args = parser.parse_args(argv)

    violations = collect_violations(args.root)
    if not violations:
        print(f"logging invariants OK ({', '.join(CHECK_DIRS)})")
        return 0

    print(f"{len(violations)} logging invariant violation(s)")
    print(format_report(violations, verbose=args.verbose, fix=args.fix))
    return 1


if __name__ == "__main__":
    sys.exit(main())
