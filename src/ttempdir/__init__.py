"""ttempdir - flags os.MkdirTemp, ioutil.TempDir and os.TempDir in Go tests."""

from pathlib import Path
from typing import List, Optional

from .analyzer import TempDirAnalyzer
from .config import AnalyzerConfig, ConfigError
from .go_parser import parse_go_source
from .logging import logger
from .reporter import Diagnostic
from .violation import (
    RULE_READ_ERROR,
    RULE_SYNTAX_ERROR,
    RULE_TEMPDIR,
    CheckResult,
    Severity,
    Violation,
)
from .whitelist import Whitelist

__all__ = [
    "__version__",
    "AnalyzerConfig",
    "CheckResult",
    "ConfigError",
    "Severity",
    "TempDirAnalyzer",
    "Violation",
    "check_file",
    "check_files",
    "check_source",
]

__version__ = "0.1.0"


def check_source(
    source: str,
    file_path: str = "",
    config: Optional[AnalyzerConfig] = None,
    whitelist: Optional[Whitelist] = None,
) -> CheckResult:
    """Check Go source text.

    Args:
        source: Go source code
        file_path: Path reported in violations; its ``_test.go`` suffix
            enables the ``all`` option
        config: Analyzer settings (default: AnalyzerConfig())
        whitelist: Suppressions; inline comments in ``source`` are always honored

    Returns:
        CheckResult with violations in source order
    """
    analyzer = TempDirAnalyzer(config)
    if whitelist is None:
        whitelist = Whitelist()

    whitelist.parse_inline_ignores(file_path, source)
    parsed = parse_go_source(source, file_path)
    logger.debug(f"{file_path}: {len(parsed.units)} function units")

    violations: List[Violation] = []
    if parsed.has_errors:
        logger.warning(f"{file_path}: parse errors, results may be incomplete")
        violations.append(
            Violation(
                rule=RULE_SYNTAX_ERROR,
                severity=Severity.WARNING,
                message="Source contains syntax errors; results may be incomplete",
                file_path=file_path,
                line=1,
            )
        )

    def report(diagnostic: Diagnostic) -> None:
        violations.append(
            Violation(
                rule=RULE_TEMPDIR,
                severity=Severity.ERROR,
                message=diagnostic.message,
                file_path=file_path,
                line=diagnostic.position.line,
                column=diagnostic.position.column,
                fix=f"Use {diagnostic.replacement}",
            )
        )

    analyzer.run(parsed.units, report)

    return CheckResult(
        file_path=file_path,
        violations=[
            v
            for v in violations
            if not whitelist.is_whitelisted(file_path, v.rule, v.line)
        ],
    )


def check_file(
    file_path: Path,
    config: Optional[AnalyzerConfig] = None,
    whitelist: Optional[Whitelist] = None,
) -> CheckResult:
    """Check a single Go file.

    Args:
        file_path: Path to file to check
        config: Analyzer settings (default: AnalyzerConfig())
        whitelist: Whitelist instance (auto-loaded if None)

    Returns:
        CheckResult with violations found
    """
    if whitelist is None:
        whitelist = Whitelist()

    try:
        source = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"{file_path}: {e}")
        return CheckResult(
            file_path=str(file_path),
            violations=[
                Violation(
                    rule=RULE_READ_ERROR,
                    severity=Severity.ERROR,
                    message=f"Failed to read file: {e}",
                    file_path=str(file_path),
                    line=1,
                )
            ],
        )

    return check_source(source, str(file_path), config=config, whitelist=whitelist)


def check_files(
    file_paths: List[Path],
    config: Optional[AnalyzerConfig] = None,
    whitelist: Optional[Whitelist] = None,
) -> List[CheckResult]:
    """Check multiple files, loading the whitelist once."""
    if whitelist is None:
        whitelist = Whitelist()

    return [
        check_file(file_path, config=config, whitelist=whitelist)
        for file_path in file_paths
    ]
