"""
Core line model shared by every component.

Three independent readers number the lines of a file: the raw content read,
the structural parser, and the authorship source. All of them go through
the helpers here so they agree on what "line N" means.
"""

from dataclasses import dataclass


def split_lines(content: str) -> list[str]:
    """Split file content into physical lines.

    Lines are separated by ``\\n`` only (matching git and tree-sitter row
    numbering). A trailing ``\\r`` is stripped from each line, and a final
    newline does not introduce an extra empty line.
    """
    if not content:
        return []
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def line_from_row(row: int) -> int:
    """Convert a 0-based parser row to a 1-based line number."""
    return row + 1


@dataclass(frozen=True)
class LineRange:
    """Represents a closed range of 1-based lines in a file."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 1:
            raise ValueError("start must be a 1-based line number")
        if self.end < self.start:
            raise ValueError("end must be >= start")

    @property
    def line_count(self) -> int:
        """Number of lines in this range."""
        return self.end - self.start + 1

    def contains(self, line: int) -> bool:
        """Check if a line number is within this range (inclusive)."""
        return self.start <= line <= self.end

    def to_slice(self) -> slice:
        """0-based half-open slice selecting this range from a line list."""
        return slice(self.start - 1, self.end)

    def fits_within(self, line_count: int) -> bool:
        """Check that every line of the range exists in a file of line_count lines."""
        return self.end <= line_count
