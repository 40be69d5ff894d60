from __future__ import annotations

from typing import Any, Dict, List

from gometrics.core.metrics import FunctionMetrics, Violation


# Threshold key in the config -> metric attribute on FunctionMetrics.
THRESHOLD_METRICS = {
    "max_length": "length",
    "max_nesting": "nesting_level",
    "max_parameters": "parameter_count",
    "max_abc_size": "abc_size",
}


def check_thresholds(metrics: FunctionMetrics, thresholds: Dict[str, Any]) -> List[Violation]:
    violations = []
    for key, metric in THRESHOLD_METRICS.items():
        limit = thresholds.get(key)
        if limit is None:
            continue
        value = getattr(metrics, metric)
        if value > limit:
            violations.append(Violation(function=metrics, metric=metric, value=value, limit=limit))
    return violations
