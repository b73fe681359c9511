"""Tests for Go file discovery."""

import pytest

from ttempdir.scanner import expand_targets, find_go_files


@pytest.fixture
def tree(tmp_path):
    for rel in [
        "main.go",
        "pkg/a.go",
        "pkg/a_test.go",
        "pkg/notes.txt",
        "vendor/dep/dep.go",
        "pkg/testdata/src/x.go",
        ".git/hooks/h.go",
        "_tools/t.go",
    ]:
        path = tmp_path / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("package x\n")
    return tmp_path


def test_find_go_files(tree):
    found = [p.relative_to(tree).as_posix() for p in find_go_files(tree)]
    assert found == ["main.go", "pkg/a.go", "pkg/a_test.go"]


def test_find_go_files_missing_dir(tmp_path):
    assert find_go_files(tmp_path / "nope") == []


def test_expand_package_pattern(tree):
    found = [p.name for p in expand_targets(["./..."])]
    assert found == ["main.go", "a.go", "a_test.go"]


def test_expand_deduplicates(tree):
    found = expand_targets([str(tree / "pkg"), str(tree / "pkg" / "a.go")])
    assert [p.name for p in found] == ["a.go", "a_test.go"]


def test_explicit_file_is_kept_even_if_skipped_dir(tree):
    target = tree / "vendor" / "dep" / "dep.go"
    assert expand_targets([str(target)]) == [target]


def test_missing_target(tmp_path):
    with pytest.raises(FileNotFoundError):
        expand_targets([str(tmp_path / "missing")])
