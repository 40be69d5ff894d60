"""
Nesting depth of a function body as gofmt would indent it.

Raw tree depth over-counts: a ``switch``, type switch or ``select`` does not
push its clauses one level deeper than the switch keyword, only the clause
bodies are indented. The walk therefore carries an explicit level per node
instead of using the node's depth in the tree.

gofmt keeps a function body on one line when it is written that way, but it
always breaks nested blocks and clause bodies onto their own lines. Statements
of those are counted wherever they sit in the source.
"""

from __future__ import annotations

from typing import Iterator, List, Tuple


BLOCK_NODE_TYPES = {"block"}

# Owners of a body that gofmt may leave on a single line.
FUNCTION_BODY_OWNERS = {"function_declaration", "method_declaration", "func_literal"}

SWITCH_NODE_TYPES = {
    "expression_switch_statement",
    "type_switch_statement",
    "select_statement",
}

CLAUSE_NODE_TYPES = {
    "expression_case",
    "type_case",
    "communication_case",
    "default_case",
}

# Fields holding the match part of a clause, which stays on the `case` line.
CLAUSE_HEADER_FIELDS = ("value", "type", "communication")

# Bracketed groups whose elements gofmt indents once they move to their own line.
CONTINUATION_NODE_TYPES = {
    "literal_value",
    "argument_list",
    "field_declaration_list",
    "interface_type",
    "var_declaration",
    "var_spec_list",
    "const_declaration",
    "type_declaration",
}


def nesting_level(func_node) -> int:
    body = func_node.child_by_field_name("body")
    deepest = 1
    stack: List[Tuple[object, int]] = [(body, 0)]
    while stack:
        node, level = stack.pop()
        headers = _clause_headers(node)
        for child in _children(node):
            child_level = _child_level(node, child, level)
            if _starts_line(node, child, headers):
                deepest = max(deepest, child_level)
            stack.append((child, child_level))
    return deepest


def _children(node) -> Iterator[object]:
    # statement_list only wraps the statements of a block or clause.
    for child in node.named_children:
        if child.type == "statement_list":
            yield from child.named_children
        else:
            yield child


def _clause_headers(node) -> set:
    if node.type not in CLAUSE_NODE_TYPES:
        return set()
    headers = set()
    for field in CLAUSE_HEADER_FIELDS:
        for child in node.children_by_field_name(field):
            headers.add(child.id)
    return headers


def _starts_line(parent, child, headers: set) -> bool:
    if parent.type in BLOCK_NODE_TYPES:
        owner = parent.parent
        if owner is None or owner.type not in FUNCTION_BODY_OWNERS:
            return True
    elif parent.type in CLAUSE_NODE_TYPES and child.id not in headers:
        return True
    return child.start_point[0] > parent.start_point[0]


def _child_level(parent, child, level: int) -> int:
    if parent.type in BLOCK_NODE_TYPES:
        return level + 1
    if parent.type in SWITCH_NODE_TYPES:
        # Header and clauses stay on the switch's own level.
        return level
    if parent.type in CLAUSE_NODE_TYPES:
        return level + 1
    if parent.type in CONTINUATION_NODE_TYPES and child.start_point[0] > parent.start_point[0]:
        return level + 1
    return level
