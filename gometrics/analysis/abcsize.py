"""
ABC size: the Euclidean norm of the Assignment, Branch and Condition counts
of one function body.

The body is walked once. Each node kind that takes part in the metric has an
entry in ``ABC_RULES``; every other kind is traversed without being counted.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Dict

from gometrics.parsing.treesitter import ParsedFile, iter_nodes, node_text


BLANK_IDENTIFIER = "_"

PLAIN_TARGET_TYPES = {"identifier", "blank_identifier"}

FOR_HEADER_TYPES = {"for_clause", "range_clause", "block", "comment"}


@dataclass
class AbcCounts:
    assignments: int = 0
    branches: int = 0
    conditions: int = 0

    @property
    def size(self) -> float:
        return round_score(
            math.sqrt(self.assignments ** 2 + self.branches ** 2 + self.conditions ** 2)
        )


def round_score(value: float) -> float:
    """Round half away from zero to two decimals (``value`` is never negative)."""
    return math.floor(value * 100 + 0.5) / 100


def abc_counts(parsed: ParsedFile, func_node) -> AbcCounts:
    counts = AbcCounts()
    body = func_node.child_by_field_name("body")
    for node in iter_nodes(body):
        rule = ABC_RULES.get(node.type)
        if rule is not None:
            rule(parsed, node, counts)
    return counts


def abc_size(parsed: ParsedFile, func_node) -> float:
    return abc_counts(parsed, func_node).size


def _var_spec(parsed: ParsedFile, node, counts: AbcCounts) -> None:
    if node.child_by_field_name("value") is None:
        return
    for name in node.children_by_field_name("name"):
        if node_text(parsed, name) != BLANK_IDENTIFIER:
            counts.assignments += 1


def _assignment(parsed: ParsedFile, node, counts: AbcCounts) -> None:
    _count_targets(parsed, node.child_by_field_name("left"), counts)


def _type_switch(parsed: ParsedFile, node, counts: AbcCounts) -> None:
    # `switch v := x.(type)` binds v like a short variable declaration.
    _count_targets(parsed, node.child_by_field_name("alias"), counts)


def _count_targets(parsed: ParsedFile, left, counts: AbcCounts) -> None:
    if left is None:
        return
    targets = left.named_children if left.type == "expression_list" else [left]
    for target in targets:
        # Index and selector targets (a[i], p.x) are not counted.
        if target.type in PLAIN_TARGET_TYPES and node_text(parsed, target) != BLANK_IDENTIFIER:
            counts.assignments += 1


def _inc_dec(parsed: ParsedFile, node, counts: AbcCounts) -> None:
    counts.assignments += 1


def _branch(parsed: ParsedFile, node, counts: AbcCounts) -> None:
    counts.branches += 1


def _if(parsed: ParsedFile, node, counts: AbcCounts) -> None:
    counts.conditions += 1
    alternative = node.child_by_field_name("alternative")
    # An `else if` is counted by the nested if_statement itself.
    if alternative is not None and alternative.type == "block":
        counts.conditions += 1


def _for(parsed: ParsedFile, node, counts: AbcCounts) -> None:
    if _loop_condition(node) is not None:
        counts.conditions += 1


def _clause(parsed: ParsedFile, node, counts: AbcCounts) -> None:
    counts.conditions += 1


def _loop_condition(node):
    for child in node.named_children:
        if child.type == "for_clause":
            return child.child_by_field_name("condition")
        if child.type not in FOR_HEADER_TYPES:
            return child
    return None


ABC_RULES: Dict[str, Callable[[ParsedFile, object, AbcCounts], None]] = {
    # Assignment
    "var_spec": _var_spec,
    "assignment_statement": _assignment,
    "short_var_declaration": _assignment,
    "receive_statement": _assignment,
    "type_switch_statement": _type_switch,
    "inc_statement": _inc_dec,
    "dec_statement": _inc_dec,
    # Branch
    "call_expression": _branch,
    "type_conversion_expression": _branch,
    "goto_statement": _branch,
    # Condition
    "if_statement": _if,
    "for_statement": _for,
    "expression_case": _clause,
    "type_case": _clause,
    "communication_case": _clause,
}
