"""
Tests for parameter counting.
"""

import pytest

from gometrics.analysis.parameters import count_parameters


class TestParameterCount:
    """Named, non-blank parameters of a declaration."""

    @pytest.mark.parametrize(
        "signature, expected",
        [
            ("func f(a int, b int) {}", 2),
            ("func f(a, b, c int) {}", 3),
            ("func f() {}", 0),
            ("func f(x int) {}", 1),
            ("func f(a, _ int, z float32) {}", 2),
            ("func f(a, b int, z float32) {}", 3),
            ("func f(prefix string, values ...int) {}", 2),
            ("func f(a, b int, z float64, opt ...interface{}) {}", 4),
            ("func f(int, int, float64) {}", 0),
            ("func f(_ int) {}", 0),
        ],
    )
    def test_signatures(self, go_function, signature, expected):
        parsed, node = go_function(f"package t\n{signature}\n")
        assert count_parameters(parsed, node) == expected

    def test_receiver_is_not_a_parameter(self, go_function):
        parsed, node = go_function(
            """
            package t

            func (s *Server) Handle(w http.ResponseWriter, r *http.Request) {
            }
            """
        )
        assert count_parameters(parsed, node) == 2

    def test_function_typed_parameter_counts_once(self, go_function):
        parsed, node = go_function(
            """
            package t

            func apply(xs []int, fn func(int, int) int) {
            }
            """
        )
        assert count_parameters(parsed, node) == 2

    def test_type_parameters_are_ignored(self, go_function):
        parsed, node = go_function(
            """
            package t

            func Map[T, U any](xs []T, f func(T) U) []U {
                return nil
            }
            """
        )
        assert count_parameters(parsed, node) == 2
