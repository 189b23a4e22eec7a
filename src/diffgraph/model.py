"""
Core Data Objects

Defines the data structures passed between the pipeline stages:
    - ResponseSet (parsed survey rows)
    - DifferenceMatrix (pairwise answer distance for one question)
    - LayoutPoint (node placement)
    - GraphNode / GraphEdge / DiffGraph (renderer input)
    - Edge (adjacency-list record)

ARCHITECTURAL RULE:
    These objects:
        - Are derived from the input file on every run
        - Are immutable once built
        - Know nothing about how they will be drawn
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple


ResponseRow = Tuple[Optional[int], ...]


@dataclass(frozen=True)
class ResponseSet:
    """
    Ordered survey responses, one row per respondent.

    The position of a row is the respondent's identity (R1, R2, ...).

    Rows may have different lengths: the loader drops tokens that are not
    integers, so a row holds only the values that parsed. When loaded with
    the "mark" missing policy, unparseable tokens are kept as None instead.

    Properties:
        rows: Parsed rows, in file order
        header: Tokens of the skipped header line (informational only)
        source: Path the rows were read from, if any
    """

    rows: Tuple[ResponseRow, ...] = ()
    header: Tuple[str, ...] = ()
    source: Optional[str] = None

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[ResponseRow]:
        return iter(self.rows)

    def __getitem__(self, index: int) -> ResponseRow:
        return self.rows[index]

    @property
    def is_empty(self) -> bool:
        return not self.rows

    @property
    def question_count(self) -> int:
        """Number of questions, taken from the length of the first row."""
        if not self.rows:
            return 0
        return len(self.rows[0])

    def value(self, respondent: int, question: int) -> Optional[int]:
        """
        Answer of one respondent to one question.

        Returns:
            The integer answer, or None if the row is too short or the
            answer was marked missing
        """
        row = self.rows[respondent]
        if question < len(row):
            return row[question]
        return None


@dataclass(frozen=True)
class DifferenceMatrix:
    """
    All-pairs absolute answer difference for a single question.

    values[i][j] == |answer_i - answer_j|, or 0 when either answer is missing.

    INVARIANTS:
        - Square: len(values) == len(values[i]) for every i
        - Symmetric: values[i][j] == values[j][i]
        - Zero diagonal
    """

    question_index: int
    values: Tuple[Tuple[int, ...], ...] = ()

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> Tuple[int, ...]:
        return self.values[index]

    @property
    def size(self) -> int:
        return len(self.values)

    def to_lists(self) -> List[List[int]]:
        return [list(row) for row in self.values]


@dataclass(frozen=True)
class LayoutPoint:
    """Node position in canvas coordinates."""

    x: float
    y: float


@dataclass(frozen=True)
class GraphNode:
    """
    One respondent as drawn.

    Properties:
        index: Respondent position in the ResponseSet (0-based)
        label: Display text, e.g. "R1 (4)"
        x, y: Canvas position
        value: First answer of the row, shown in the label (None if absent)
    """

    index: int
    label: str
    x: float
    y: float
    value: Optional[int] = None

    @property
    def node_id(self) -> str:
        return f"R{self.index + 1}"


@dataclass(frozen=True)
class GraphEdge:
    """Undirected edge between two respondents, weighted by their difference."""

    source: int
    target: int
    weight: int

    @property
    def label(self) -> str:
        return str(self.weight)


@dataclass(frozen=True)
class Edge:
    """Adjacency-list record: neighbour identifier and edge weight."""

    target: str
    weight: int


@dataclass(frozen=True)
class DiffGraph:
    """
    Renderer input for one question.

    Nodes are ordered by respondent index. Edges are ordered by (source,
    target) with source < target.
    """

    question_index: int
    nodes: Tuple[GraphNode, ...] = field(default_factory=tuple)
    edges: Tuple[GraphEdge, ...] = field(default_factory=tuple)

    def get_node(self, index: int) -> Optional[GraphNode]:
        """
        Retrieve a node by respondent index.

        Returns:
            GraphNode or None if not found
        """
        for node in self.nodes:
            if node.index == index:
                return node
        return None
