"""Report formatting for checker results."""

import json
from typing import List

from .violation import CheckResult, Severity


def format_text(results: List[CheckResult], verbose: bool = False) -> str:
    """Format results as compiler-style text.

    One ``path:line:col: message`` line per violation, followed by a
    summary block.

    Args:
        results: List of check results
        verbose: Also show suggested fixes and files without findings

    Returns:
        Formatted text report
    """
    lines = []
    total_errors = 0
    total_warnings = 0
    failed_count = 0

    for result in results:
        total_errors += result.error_count
        total_warnings += result.warning_count
        if not result.passed:
            failed_count += 1

        if not result.violations:
            if verbose:
                lines.append(f"{result.file_path}: ok")
            continue

        for violation in result.violations:
            prefix = "" if violation.severity == Severity.ERROR else "warning: "
            loc = f"{violation.file_path}:{violation.line}"
            if violation.column:
                loc += f":{violation.column}"
            lines.append(f"{loc}: {prefix}{violation.message}")
            if verbose and violation.fix:
                lines.append(f"    fix: {violation.fix}")

    if lines:
        lines.append("")
    lines.append(
        f"Checked {len(results)} files: "
        f"{total_errors} errors, {total_warnings} warnings"
    )
    if failed_count:
        lines.append(f"{failed_count} files with errors")

    return "\n".join(lines)


def format_json(results: List[CheckResult]) -> str:
    """Format results as JSON for CI/CD."""
    total_errors = sum(r.error_count for r in results)
    total_warnings = sum(r.warning_count for r in results)
    passed_count = sum(1 for r in results if r.passed)

    output = {
        "summary": {
            "checked": len(results),
            "passed": passed_count,
            "failed": len(results) - passed_count,
            "errors": total_errors,
            "warnings": total_warnings,
        },
        "results": [
            {
                "file": result.file_path,
                "passed": result.passed,
                "violations": [
                    {
                        "rule": v.rule,
                        "severity": v.severity.value,
                        "message": v.message,
                        "line": v.line,
                        "column": v.column,
                        "fix": v.fix,
                    }
                    for v in result.violations
                ],
            }
            for result in results
        ],
    }

    return json.dumps(output, indent=2)


def format_summary(results: List[CheckResult]) -> str:
    """Format concise one-line summary."""
    total_errors = sum(r.error_count for r in results)
    total_warnings = sum(r.warning_count for r in results)
    passed_count = sum(1 for r in results if r.passed)
    failed_count = len(results) - passed_count

    parts = [f"{len(results)} files"]

    if passed_count > 0:
        parts.append(f"{passed_count} passed")
    if failed_count > 0:
        parts.append(f"{failed_count} failed")
    if total_errors > 0:
        parts.append(f"{total_errors} errors")
    if total_warnings > 0:
        parts.append(f"{total_warnings} warnings")

    return " | ".join(parts)
