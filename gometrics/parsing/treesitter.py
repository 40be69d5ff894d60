from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Tuple, Union

import tree_sitter_go
from tree_sitter import Language, Parser


logger = logging.getLogger(__name__)

GO_EXTENSIONS = {".go"}

# Prepended on the same line so that line numbers of the snippet are preserved.
PACKAGE_HEADER = b"package p;"


class GoParseError(ValueError):
    """Raised when Go source cannot be turned into an error-free syntax tree."""

    def __init__(self, path: str, line: int, column: int) -> None:
        super().__init__(f"{path}:{line}:{column}: syntax error")
        self.path = path
        self.line = line
        self.column = column


@dataclass(frozen=True)
class ParsedFile:
    path: str
    source: bytes
    tree: object
    column_offset: int = 0

    @property
    def text(self) -> str:
        return self.source.decode("utf-8", errors="replace")

    @property
    def root(self):
        return self.tree.root_node


@lru_cache(maxsize=None)
def go_language() -> Language:
    return Language(tree_sitter_go.language())


@lru_cache(maxsize=None)
def _parser() -> Parser:
    return Parser(go_language())


def is_go_file(path: str) -> bool:
    return Path(path).suffix.lower() in GO_EXTENSIONS


def parse_source(
    source: Union[str, bytes],
    path: str = "<source>",
    strict: bool = True,
) -> ParsedFile:
    if isinstance(source, str):
        source = source.encode("utf-8")
    parsed = ParsedFile(path=path, source=source, tree=_parser().parse(source))
    if parsed.root.has_error and not _has_package_clause(parsed):
        logger.debug("%s: retrying parse with a synthetic package clause", path)
        retried = ParsedFile(
            path=path,
            source=PACKAGE_HEADER + source,
            tree=_parser().parse(PACKAGE_HEADER + source),
            column_offset=len(PACKAGE_HEADER),
        )
        if not retried.root.has_error:
            return retried
    if parsed.root.has_error:
        error = _first_error(parsed.root)
        line, column = position(parsed, error)
        if strict:
            raise GoParseError(path, line, column)
        logger.warning("%s:%d:%d: syntax error, analyzing partial tree", path, line, column)
    return parsed


def parse_file(path: str, strict: bool = True) -> ParsedFile:
    source = Path(path).read_bytes()
    return parse_source(source, path=path, strict=strict)


def position(parsed: ParsedFile, node) -> Tuple[int, int]:
    """1-based (line, column) of the node's first byte in the original source."""
    row, column = node.start_point[0], node.start_point[1]
    if row == 0:
        column -= parsed.column_offset
    return row + 1, column + 1


def iter_nodes(node) -> Iterable[object]:
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))


def node_text(parsed: ParsedFile, node) -> str:
    return parsed.source[node.start_byte : node.end_byte].decode("utf-8", errors="replace")


def _has_package_clause(parsed: ParsedFile) -> bool:
    return any(child.type == "package_clause" for child in parsed.root.children)


def _first_error(root):
    for node in iter_nodes(root):
        if node.type == "ERROR" or node.is_missing:
            return node
    return root
