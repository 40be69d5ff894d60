from gometrics.analysis.abcsize import AbcCounts, abc_counts, abc_size
from gometrics.analysis.analyzer import analyze, analyze_source
from gometrics.analysis.length import function_length
from gometrics.analysis.nesting import nesting_level
from gometrics.analysis.parameters import count_parameters

__all__ = [
    "AbcCounts",
    "abc_counts",
    "abc_size",
    "analyze",
    "analyze_source",
    "count_parameters",
    "function_length",
    "nesting_level",
]
