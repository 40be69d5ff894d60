from __future__ import annotations

from typing import List, Union

from gometrics.analysis.abcsize import abc_size
from gometrics.analysis.length import function_length
from gometrics.analysis.nesting import nesting_level
from gometrics.analysis.parameters import count_parameters
from gometrics.core.metrics import FunctionMetrics
from gometrics.parsing.treesitter import ParsedFile, iter_nodes, node_text, parse_source, position


FUNCTION_NODE_TYPES = {"function_declaration", "method_declaration"}


def analyze(parsed: ParsedFile) -> List[FunctionMetrics]:
    """Metrics for every function and method declaration, in source order.

    Declarations without a body (implemented outside Go) are skipped.
    """
    metrics: List[FunctionMetrics] = []
    for node in iter_nodes(parsed.root):
        if node.type not in FUNCTION_NODE_TYPES:
            continue
        name_node = node.child_by_field_name("name")
        if name_node is None or node.child_by_field_name("body") is None:
            continue
        line, column = position(parsed, name_node)
        metrics.append(
            FunctionMetrics(
                name=node_text(parsed, name_node),
                line=line,
                column=column,
                length=function_length(node),
                nesting_level=nesting_level(node),
                parameter_count=count_parameters(parsed, node),
                abc_size=abc_size(parsed, node),
            )
        )
    return metrics


def analyze_source(
    source: Union[str, bytes],
    path: str = "<source>",
    strict: bool = True,
) -> List[FunctionMetrics]:
    return analyze(parse_source(source, path=path, strict=strict))
