"""
gometrics

Per-function complexity metrics for Go source: length, nesting level,
parameter count and ABC size.
"""

__version__ = "1.0.0"

from gometrics.analysis.analyzer import analyze, analyze_source
from gometrics.core.config import Config
from gometrics.core.engine import AnalysisEngine, AnalysisReport
from gometrics.core.metrics import FunctionMetrics
from gometrics.parsing.treesitter import GoParseError, parse_file, parse_source

__all__ = [
    "AnalysisEngine",
    "AnalysisReport",
    "Config",
    "FunctionMetrics",
    "GoParseError",
    "analyze",
    "analyze_source",
    "parse_file",
    "parse_source",
]
