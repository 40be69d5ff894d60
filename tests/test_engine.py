"""
Tests for the analysis engine and file discovery.
"""

import os

from gometrics.core.config import Config
from gometrics.core.engine import AnalysisEngine
from gometrics.utils.files import iter_source_files


PROJECT = {
    "main.go": """
        package main

        func main() {
            run()
        }
    """,
    "pkg/util.go": """
        package pkg

        func Sum(xs ...int) int {
            total := 0
            for _, x := range xs {
                total += x
            }
            return total
        }
    """,
    "pkg/util_test.go": """
        package pkg

        func TestSum(t *testing.T) {
            if Sum(1, 2) != 3 {
                t.Fatal("bad sum")
            }
        }
    """,
    "vendor/dep/dep.go": """
        package dep

        func Vendored() {}
    """,
    "README.md": "not go\n",
}


def relative(root, paths):
    return [os.path.relpath(path, root) for path in paths]


class TestSourceFiles:
    """Discovery of Go files."""

    def test_walks_sorted_and_skips_ignored_dirs(self, go_project):
        root = go_project(PROJECT)
        files = iter_source_files(str(root), {"vendor"})
        assert relative(root, files) == [
            "main.go",
            os.path.join("pkg", "util.go"),
            os.path.join("pkg", "util_test.go"),
        ]

    def test_can_skip_test_files(self, go_project):
        root = go_project(PROJECT)
        files = iter_source_files(str(root), {"vendor"}, include_tests=False)
        assert relative(root, files) == ["main.go", os.path.join("pkg", "util.go")]

    def test_file_path_is_yielded_as_is(self, go_project):
        root = go_project(PROJECT)
        path = str(root / "main.go")
        assert list(iter_source_files(path, set())) == [path]


class TestAnalysisEngine:
    """Running the analyzer over files and directories."""

    def test_analyzes_directory(self, go_project):
        root = go_project(PROJECT)
        report = AnalysisEngine(Config.load(None)).analyze([str(root)])
        names = [m.name for file_report in report.files for m in file_report.functions]
        assert names == ["main", "Sum", "TestSum"]
        assert report.function_count == 3
        assert not report.has_errors

    def test_include_tests_false(self, go_project):
        root = go_project(PROJECT)
        config = Config.from_dict({"files": {"include_tests": False}})
        report = AnalysisEngine(config).analyze([str(root)])
        assert [m.name for f in report.files for m in f.functions] == ["main", "Sum"]

    def test_missing_path_is_an_error(self, tmp_path):
        missing = str(tmp_path / "nope.go")
        report = AnalysisEngine(Config.load(None)).analyze([missing])
        assert report.files == []
        assert [e.path for e in report.errors] == [missing]

    def test_parse_error_does_not_stop_other_files(self, go_project):
        root = go_project(
            {
                "a.go": "package a\n\nfunc broken( {\n",
                "b.go": "package a\n\nfunc fine() {\n}\n",
            }
        )
        report = AnalysisEngine(Config.load(None)).analyze([str(root)])
        assert [f.path for f in report.files] == [str(root / "b.go")]
        assert [e.path for e in report.errors] == [str(root / "a.go")]
        assert "syntax error" in report.errors[0].message

    def test_non_strict_parsing_keeps_partial_files(self, go_project):
        root = go_project({"a.go": "package a\n\nfunc ok() {\n}\n\nfunc broken( {\n"})
        config = Config.from_dict({"parsing": {"strict": False}})
        report = AnalysisEngine(config).analyze([str(root)])
        assert not report.has_errors
        assert "ok" in [m.name for m in report.files[0].functions]

    def test_threshold_violations(self, go_project):
        root = go_project(PROJECT)
        config = Config.from_dict({"thresholds": {"max_parameters": 0, "max_nesting": None}})
        report = AnalysisEngine(config).analyze([str(root / "pkg" / "util_test.go")])
        (file_report,) = report.files
        assert [(v.function.name, v.metric) for v in file_report.violations] == [
            ("TestSum", "parameter_count"),
        ]
        assert report.violation_count == 1
