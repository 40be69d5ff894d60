"""
Shared helpers for the gometrics tests.
"""

import os
import sys
import textwrap

import pytest

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from gometrics.analysis.analyzer import FUNCTION_NODE_TYPES
from gometrics.parsing.treesitter import iter_nodes, parse_source


def parse_function(source: str):
    """Parse a Go snippet and return (parsed, first function declaration node)."""
    parsed = parse_source(textwrap.dedent(source))
    for node in iter_nodes(parsed.root):
        if node.type in FUNCTION_NODE_TYPES:
            return parsed, node
    raise AssertionError("snippet contains no function declaration")


@pytest.fixture
def go_function():
    return parse_function


@pytest.fixture
def go_project(tmp_path):
    """Write a mapping of relative path -> Go source under tmp_path."""

    def write(files):
        for name, source in files.items():
            path = tmp_path / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(textwrap.dedent(source), encoding="utf-8")
        return tmp_path

    return write
