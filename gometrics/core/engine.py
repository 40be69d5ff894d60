from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List

from gometrics.analysis.analyzer import analyze
from gometrics.analysis.thresholds import check_thresholds
from gometrics.core.config import Config
from gometrics.core.metrics import AnalysisError, FileReport
from gometrics.parsing.treesitter import GoParseError, parse_file
from gometrics.utils.files import iter_source_files


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisReport:
    files: List[FileReport] = field(default_factory=list)
    errors: List[AnalysisError] = field(default_factory=list)

    @property
    def function_count(self) -> int:
        return sum(len(report.functions) for report in self.files)

    @property
    def violation_count(self) -> int:
        return sum(len(report.violations) for report in self.files)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)


class AnalysisEngine:
    def __init__(self, config: Config) -> None:
        self.config = config

    def analyze(self, paths: Iterable[str]) -> AnalysisReport:
        files: List[FileReport] = []
        errors: List[AnalysisError] = []
        for path in paths:
            if not Path(path).exists():
                logger.warning("%s: no such file or directory", path)
                errors.append(AnalysisError(path=path, message="no such file or directory"))
                continue
            for file_path in iter_source_files(
                path,
                self.config.ignored_dirs(),
                include_tests=self.config.include_tests(),
            ):
                try:
                    files.append(self.analyze_file(file_path))
                except GoParseError as exc:
                    logger.warning("%s", exc)
                    errors.append(AnalysisError(path=file_path, message=str(exc)))
                except OSError as exc:
                    logger.warning("%s: %s", file_path, exc)
                    errors.append(AnalysisError(path=file_path, message=str(exc)))
        report = AnalysisReport(files=files, errors=errors)
        logger.info(
            "Analyzed %d file(s): %d function(s), %d violation(s), %d error(s)",
            len(report.files),
            report.function_count,
            report.violation_count,
            len(report.errors),
        )
        return report

    def analyze_file(self, path: str) -> FileReport:
        logger.debug("Analyzing %s", path)
        parsed = parse_file(path, strict=self.config.strict_parsing())
        functions = analyze(parsed)
        thresholds = self.config.thresholds()
        violations = []
        for metrics in functions:
            violations.extend(check_thresholds(metrics, thresholds))
        return FileReport(path=path, functions=functions, violations=violations)
