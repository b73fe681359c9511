"""Suppression support for checker violations.

Supports two mechanisms:
1. ``[[whitelist]]`` tables in .ttempdir.toml (project-level exemptions)
2. Inline comments (per-line exemptions)
"""

import re
from fnmatch import fnmatch
from pathlib import Path
from typing import Dict, List, Optional, Set

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .config import ConfigError, find_config_file, read_config_file

INLINE_IGNORE_PATTERN = re.compile(
    r"//\s*ttempdir:ignore(?:\[([^\]]+)\])?(?::\s*(.+))?"
)


class WhitelistEntry(BaseModel):
    """A single ``[[whitelist]]`` table."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    file_pattern: str = Field(alias="file")  # Glob pattern or specific file
    rule: str = "*"  # Rule name or '*' for all
    lines: Optional[List[int]] = None  # Specific lines, None = all lines
    reason: Optional[str] = None


class Whitelist:
    """Manages checker violation exemptions.

    Args:
        config_path: Path to .ttempdir.toml (default: search from cwd)
    """

    def __init__(self, config_path: Optional[Path] = None):
        self.entries: List[WhitelistEntry] = []
        self.inline_ignores: Dict[str, Dict[int, Set[str]]] = {}  # file -> line -> rules

        if config_path is None:
            config_path = find_config_file()
        if config_path is not None:
            self._load_config(config_path)

    def _load_config(self, config_path: Path) -> None:
        """Load whitelist entries from TOML config.

        Example .ttempdir.toml:
        ```toml
        [[whitelist]]
        file = "internal/legacy/*_test.go"
        rule = "ttempdir"
        lines = [42]
        reason = "directory must outlive the test"
        ```

        Raises:
            ConfigError: If an entry is malformed
        """
        data = read_config_file(config_path)
        entries = data.get("whitelist", [])
        if not isinstance(entries, list):
            raise ConfigError(
                f"Invalid whitelist in {config_path}: expected [[whitelist]] tables"
            )
        for entry in entries:
            try:
                self.entries.append(WhitelistEntry.model_validate(entry))
            except ValidationError as e:
                raise ConfigError(
                    f"Invalid whitelist entry in {config_path}: {e}"
                ) from e

    def add_inline_ignore(self, file_path: str, line: int, rules: Set[str]) -> None:
        self.inline_ignores.setdefault(file_path, {})[line] = rules

    def parse_inline_ignores(self, file_path: str, source: str) -> None:
        """Parse inline ignore comments from Go source.

        Supported formats:
        - // ttempdir:ignore - Ignore all rules on this line
        - // ttempdir:ignore[rule1,rule2] - Ignore specific rules
        - // ttempdir:ignore: reason - Ignore with reason
        """
        # Only "\n" ends a Go line; splitlines() would also break on "\f" and "\v".
        for line_num, line in enumerate(source.split("\n"), start=1):
            match = INLINE_IGNORE_PATTERN.search(line)
            if not match:
                continue
            rules_str = match.group(1)
            if rules_str:
                rules = {r.strip() for r in rules_str.split(",")}
            else:
                rules = {"*"}
            self.add_inline_ignore(file_path, line_num, rules)

    def is_whitelisted(self, file_path: str, rule: str, line: int) -> bool:
        """Check if a violation should be ignored."""
        ignored_rules = self.inline_ignores.get(file_path, {}).get(line)
        if ignored_rules and ("*" in ignored_rules or rule in ignored_rules):
            return True

        return self._find_entry(file_path, rule, line) is not None

    def _find_entry(self, file_path: str, rule: str, line: int) -> Optional[WhitelistEntry]:
        for entry in self.entries:
            if not self._matches_pattern(file_path, entry.file_pattern):
                continue
            if entry.rule != "*" and entry.rule != rule:
                continue
            if entry.lines is not None and line not in entry.lines:
                continue
            return entry
        return None

    def _matches_pattern(self, file_path: str, pattern: str) -> bool:
        """Match a glob against the path, any of its suffixes, or its name.

        ``internal/*_test.go`` matches ``/src/repo/internal/a_test.go``.
        """
        path = Path(file_path)
        parts = path.parts
        for i in range(len(parts)):
            if fnmatch(Path(*parts[i:]).as_posix(), pattern):
                return True
        return fnmatch(path.name, pattern)
