from __future__ import annotations

from gometrics.parsing.treesitter import ParsedFile, node_text


BLANK_IDENTIFIER = "_"

PARAMETER_NODE_TYPES = {"parameter_declaration", "variadic_parameter_declaration"}


def count_parameters(parsed: ParsedFile, func_node) -> int:
    # Receivers and type parameters live in other fields and are not counted.
    params = func_node.child_by_field_name("parameters")
    if params is None:
        return 0
    count = 0
    for group in params.named_children:
        if group.type not in PARAMETER_NODE_TYPES:
            continue
        for name in group.children_by_field_name("name"):
            if node_text(parsed, name) != BLANK_IDENTIFIER:
                count += 1
    return count
