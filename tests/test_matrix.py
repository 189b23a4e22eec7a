"""
Tests for the difference matrix builder.

Every matrix must be square, symmetric and zero on the diagonal, and a
respondent without an answer to the question contributes only zeros.
"""

import pytest

from diffgraph.csv_loader import parse_responses_string
from diffgraph.matrix import build_all_matrices, build_difference_matrix
from diffgraph.model import ResponseSet


def _responses(*rows) -> ResponseSet:
    return ResponseSet(rows=tuple(tuple(row) for row in rows))


class TestSingleQuestion:
    """Test the matrix for one question."""

    def test_reference_example(self):
        responses = _responses([5], [8], [5])
        matrix = build_difference_matrix(responses, 0)
        assert matrix.to_lists() == [[0, 3, 0], [3, 0, 3], [0, 3, 0]]
        assert matrix.question_index == 0

    def test_selects_column(self):
        responses = _responses([1, 10], [1, 4])
        assert build_difference_matrix(responses, 1).to_lists() == [[0, 6], [6, 0]]

    def test_negative_values(self):
        responses = _responses([-8], [2])
        assert build_difference_matrix(responses, 0)[0][1] == 10

    def test_symmetric_with_zero_diagonal(self):
        responses = _responses([3, 1, 4], [1, 5, 9], [2, 6], [5, 3, 5], [])
        for q in range(3):
            matrix = build_difference_matrix(responses, q)
            n = len(matrix)
            for i in range(n):
                assert matrix[i][i] == 0
                for j in range(n):
                    assert matrix[i][j] == matrix[j][i]
                    assert matrix[i][j] >= 0

    def test_short_row_gives_zero_cells(self):
        """Rows without an answer at q contribute 0 to every cell."""
        responses = _responses([1, 2, 3], [4, 6], [9, 9, 9])
        matrix = build_difference_matrix(responses, 2)
        assert matrix[1] == (0, 0, 0)
        assert [row[1] for row in matrix.values] == [0, 0, 0]
        assert matrix[0][2] == 6

    def test_marked_missing_gives_zero_cells(self):
        responses = parse_responses_string("A,B\n1,x\n2,7\n", missing="mark")
        matrix = build_difference_matrix(responses, 1)
        assert matrix.to_lists() == [[0, 0], [0, 0]]

    def test_question_past_every_row(self):
        responses = _responses([1], [2])
        assert build_difference_matrix(responses, 5).to_lists() == [[0, 0], [0, 0]]

    def test_empty_responses(self):
        matrix = build_difference_matrix(ResponseSet(), 0)
        assert matrix.size == 0
        assert matrix.to_lists() == []

    def test_negative_question_rejected(self):
        with pytest.raises(ValueError):
            build_difference_matrix(_responses([1]), -1)


class TestAllQuestions:
    """Test building one matrix per question."""

    def test_one_matrix_per_question(self):
        responses = _responses([1, 2, 3], [3, 2, 1])
        matrices = build_all_matrices(responses)
        assert [m.question_index for m in matrices] == [0, 1, 2]
        assert [m[0][1] for m in matrices] == [2, 0, 2]

    def test_question_count_follows_first_row(self):
        """A longer later row does not add questions."""
        responses = _responses([1], [2, 3, 4])
        assert len(build_all_matrices(responses)) == 1

    def test_empty_first_row_gives_no_matrices(self):
        assert build_all_matrices(_responses([], [1, 2])) == []

    def test_every_matrix_is_square(self):
        responses = _responses([1, 2], [3, 4], [5, 6])
        for matrix in build_all_matrices(responses):
            assert len(matrix) == 3
            assert all(len(row) == 3 for row in matrix.values)
