from __future__ import annotations


def function_length(func_node) -> int:
    """Lines from the opening to the closing brace of the body, both included."""
    body = func_node.child_by_field_name("body")
    return body.end_point[0] - body.start_point[0] + 1
