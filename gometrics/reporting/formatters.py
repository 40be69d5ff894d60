from __future__ import annotations

import io
import json

from rich import box
from rich.console import Console
from rich.table import Table

from gometrics.core.engine import AnalysisReport
from gometrics.core.metrics import FileReport, Violation


TABLE_HEADERS = ["Function Name", "Length", "Parameter Count", "Nesting Level", "ABC Size"]

METRIC_LABELS = {
    "length": "length",
    "nesting_level": "nesting",
    "parameter_count": "parameters",
    "abc_size": "abc size",
}


def format_text(report: AnalysisReport, width: int = 100) -> str:
    buffer = io.StringIO()
    console = Console(file=buffer, width=width, color_system=None, markup=False, highlight=False)
    for file_report in report.files:
        console.print(file_report.path)
        console.print(_metrics_table(file_report))
        for violation in file_report.violations:
            console.print(f"  {_violation_line(file_report.path, violation)}")
        console.print()
    for error in report.errors:
        console.print(f"Error: {error.path}: {error.message}")
    console.print(
        f"Files: {len(report.files)}  Functions: {report.function_count}  "
        f"Violations: {report.violation_count}  Errors: {len(report.errors)}"
    )
    return buffer.getvalue()


def format_json(report: AnalysisReport) -> str:
    data = {
        "summary": {
            "files": len(report.files),
            "functions": report.function_count,
            "violations": report.violation_count,
            "errors": len(report.errors),
        },
        "files": [
            {
                "path": file_report.path,
                "functions": [metrics.to_dict() for metrics in file_report.functions],
                "violations": [violation.to_dict() for violation in file_report.violations],
            }
            for file_report in report.files
        ],
        "errors": [{"path": error.path, "message": error.message} for error in report.errors],
    }
    return json.dumps(data, indent=2)


def format_number(value: float) -> str:
    # 2.24 -> "2.24", 3.0 -> "3", 0.0 -> "0"
    return f"{value:.2f}".rstrip("0").rstrip(".")


def _metrics_table(file_report: FileReport) -> Table:
    table = Table(box=box.ASCII, show_lines=False)
    for header in TABLE_HEADERS:
        table.add_column(header, justify="left" if header == "Function Name" else "right")
    for metrics in file_report.functions:
        table.add_row(
            metrics.name,
            str(metrics.length),
            str(metrics.parameter_count),
            str(metrics.nesting_level),
            format_number(metrics.abc_size),
        )
    return table


def _violation_line(path: str, violation: Violation) -> str:
    function = violation.function
    label = METRIC_LABELS.get(violation.metric, violation.metric)
    return (
        f"{path}:{function.line}:{function.column}: {function.name}: "
        f"{label} {format_number(violation.value)} > {format_number(violation.limit)}"
    )
