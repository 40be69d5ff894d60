"""
Tests for function length.
"""

from gometrics.analysis.length import function_length


class TestFunctionLength:
    """Lines from the opening to the closing brace of the body."""

    def test_three_line_body(self, go_function):
        _, node = go_function(
            """
            package t

            func add(a, b int) int {
                return a + b
            }
            """
        )
        assert function_length(node) == 3

    def test_one_line_body(self, go_function):
        _, node = go_function("package t\nfunc id(x int) int { return x }\n")
        assert function_length(node) == 1

    def test_blank_lines_and_comments_are_counted(self, go_function):
        _, node = go_function(
            """
            package t

            func f() {
                // setup

                x := 1

                _ = x
            }
            """
        )
        assert function_length(node) == 7

    def test_signature_lines_are_not_counted(self, go_function):
        _, node = go_function(
            """
            package t

            func f(
                a int,
                b int,
            ) {
                _ = a + b
            }
            """
        )
        assert function_length(node) == 3
