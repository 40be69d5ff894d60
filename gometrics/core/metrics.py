from dataclasses import dataclass, field
from typing import Any, Dict, List, Union


@dataclass(frozen=True)
class FunctionMetrics:
    name: str
    line: int
    column: int
    length: int
    nesting_level: int
    parameter_count: int
    abc_size: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "line": self.line,
            "column": self.column,
            "length": self.length,
            "nesting_level": self.nesting_level,
            "parameter_count": self.parameter_count,
            "abc_size": self.abc_size,
        }


@dataclass(frozen=True)
class Violation:
    function: FunctionMetrics
    metric: str
    value: Union[int, float]
    limit: Union[int, float]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "function": self.function.name,
            "line": self.function.line,
            "column": self.function.column,
            "metric": self.metric,
            "value": self.value,
            "limit": self.limit,
        }


@dataclass(frozen=True)
class FileReport:
    path: str
    functions: List[FunctionMetrics] = field(default_factory=list)
    violations: List[Violation] = field(default_factory=list)


@dataclass(frozen=True)
class AnalysisError:
    path: str
    message: str
