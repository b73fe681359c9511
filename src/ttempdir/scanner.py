"""File scanner for finding Go sources to check."""

from pathlib import Path
from typing import Iterable, List

# Directories the go tool itself ignores when expanding ./...
SKIPPED_DIRS = frozenset({"vendor", "testdata"})
PACKAGE_PATTERN_SUFFIX = "/..."


def _is_skipped(path: Path, root: Path) -> bool:
    for part in path.relative_to(root).parts[:-1]:
        if part in SKIPPED_DIRS or part.startswith((".", "_")):
            return True
    return False


def find_go_files(directory: Path) -> List[Path]:
    """Find all Go files below a directory.

    Args:
        directory: Directory to scan

    Returns:
        Sorted list of .go file paths
    """
    if not directory or not directory.is_dir():
        return []

    files = []
    for go_file in directory.rglob("*.go"):
        if not go_file.is_file():
            continue
        if _is_skipped(go_file, directory):
            continue
        files.append(go_file)

    return sorted(files)


def expand_targets(targets: Iterable[str]) -> List[Path]:
    """Expand CLI targets into Go files.

    Targets may be files, directories, or Go package patterns ending
    in ``/...`` (treated like the directory).

    Raises:
        FileNotFoundError: If a target does not exist
    """
    files: List[Path] = []
    seen = set()
    for target in targets:
        if target.endswith(PACKAGE_PATTERN_SUFFIX):
            target = target[: -len(PACKAGE_PATTERN_SUFFIX)] or "."
        path = Path(target)

        if path.is_dir():
            candidates = find_go_files(path)
        elif path.is_file():
            candidates = [path]
        else:
            raise FileNotFoundError(f"No such file or directory: '{target}'")

        for candidate in candidates:
            key = candidate.resolve()
            if key not in seen:
                seen.add(key)
                files.append(candidate)

    return files
