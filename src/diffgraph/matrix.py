"""
Matrix Builder: pairwise answer distance between respondents.

For a question q, cell (i, j) holds |answer_i[q] - answer_j[q]|. A respondent
whose row is too short for q (or whose answer was marked missing) contributes
0 to every cell of its row and column. These cells are not errors.
"""

from typing import List

from diffgraph.model import DifferenceMatrix, ResponseSet


def build_difference_matrix(responses: ResponseSet, question_index: int) -> DifferenceMatrix:
    """
    Build the difference matrix of one question.

    Every ordered pair is computed, including i == j, so the result is a full
    respondent_count x respondent_count square.

    Args:
        responses: Parsed survey rows
        question_index: 0-based question (column) index

    Returns:
        DifferenceMatrix for the question

    Raises:
        ValueError: If question_index is negative
    """
    if question_index < 0:
        raise ValueError(f"question_index must be >= 0, got {question_index}")

    answers = [responses.value(i, question_index) for i in range(len(responses))]

    values = []
    for a in answers:
        row = []
        for b in answers:
            if a is None or b is None:
                row.append(0)
            else:
                row.append(abs(a - b))
        values.append(tuple(row))

    return DifferenceMatrix(question_index=question_index, values=tuple(values))


def build_all_matrices(responses: ResponseSet) -> List[DifferenceMatrix]:
    """One matrix per question, for questions 0..question_count-1."""
    return [
        build_difference_matrix(responses, q)
        for q in range(responses.question_count)
    ]


__all__ = ["build_difference_matrix", "build_all_matrices"]
