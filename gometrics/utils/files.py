from __future__ import annotations

from pathlib import Path
from typing import Iterable

from gometrics.parsing.treesitter import is_go_file


TEST_FILE_SUFFIX = "_test.go"


def iter_source_files(root: str, ignored_dirs: set[str], include_tests: bool = True) -> Iterable[str]:
    """Go files under ``root`` in sorted order; a file path is yielded as is."""
    root_path = Path(root)
    if root_path.is_file():
        yield str(root_path)
        return
    for path in sorted(root_path.rglob("*")):
        if not path.is_file() or not is_go_file(str(path)):
            continue
        relative = path.relative_to(root_path)
        if any(part in ignored_dirs for part in relative.parts[:-1]):
            continue
        if not include_tests and path.name.endswith(TEST_FILE_SUFFIX):
            continue
        yield str(path)
