"""
Text rendering of a heap as a complete binary tree.

Rows are printed breadth-first. Every node sits in a fixed-width field, and
shallower rows get wider padding so they line up over their descendants:

       1
   2       3
 4   5   6   7

The renderer only reads from the heap; it keeps no state between calls.
Plain text comes from :meth:`TreeRenderer.render`; :meth:`TreeRenderer.print_to`
writes the same layout to a ``rich`` console, styling the summary line and the
row labels while node cells stay plain.
"""

from __future__ import annotations
import logging
import sys
from typing import Iterator, List, Optional, TextIO, Tuple

from rich.console import Console
from rich.markup import escape

from ..datastructures.heap import MinHeap

logger = logging.getLogger(__name__)

# rich styles for the decorated parts of the output
LABEL_STYLE = "bright_black"
TITLE_STYLE = "bold bright_black"
DIVIDER_STYLE = "bold"


# -------------------------------------------------------------------
# Row geometry
# -------------------------------------------------------------------
def largest_row_size(node_count: int) -> int:
    """Nominal size of the deepest row: the largest power of two <= *node_count*.

    The highest set bit of the count gives the depth of the last row,
    e.g. 20 (0b10100) -> 16. An empty tree has no rows and yields 0.
    """
    if node_count < 0:
        raise ValueError(f"node count must be >= 0, got {node_count}")
    if node_count == 0:
        return 0
    return 2 ** (node_count.bit_length() - 1)


def row_bounds(node_count: int) -> Iterator[Tuple[int, int]]:
    """Yield ``(first, last)`` tree indices for each row, clipping the final row."""
    first = 1
    while first <= node_count:
        # Row k starts at 2**k and nominally holds 2**k nodes.
        yield first, min(2 * first - 1, node_count)
        first *= 2


# -------------------------------------------------------------------
# Renderer
# -------------------------------------------------------------------
class TreeRenderer:
    """Render a :class:`MinHeap` as an indented, level-by-level tree.

    Args:
        heap: The heap to draw. Only read, never modified.
        max_value: Largest value the heap may hold; its printed length sets the
            minimum field width so trees drawn from the same range line up.
            Longer elements in the heap still widen the field.
        annotate: Prefix each row with ``row size : inverse row size |``.
    """

    def __init__(
        self,
        heap: MinHeap,
        max_value: Optional[int] = None,
        annotate: bool = False,
    ) -> None:
        self.heap = heap
        self.max_value = max_value
        self.annotate = annotate

    def field_width(self) -> int:
        """Width of one node cell: the longest rendered value plus one gutter column."""
        longest = max((len(str(v)) for v in self.heap), default=0)
        if self.max_value is not None:
            longest = max(longest, len(str(self.max_value)))
        return longest + 1

    def summary(self, markup: bool = False) -> str:
        """One-line ``Heap (<n>): [...]`` view in array order.

        With *markup* the line carries ``rich`` style tags and the element list
        is escaped so its brackets print literally.
        """
        title = f"Heap ({len(self.heap)}): "
        body = self.heap.to_display_string()
        if not markup:
            return title + body
        return f"[{TITLE_STYLE}]{title}[/][{LABEL_STYLE}]{escape(body)}[/]"

    def rows(self, markup: bool = False) -> List[str]:
        """Return one string per tree row, without line breaks."""
        node_count = len(self.heap)
        if node_count == 0:
            return []

        width = self.field_width()
        widest = largest_row_size(node_count)
        logger.debug("rendering %d nodes (field width %d, largest row %d)", node_count, width, widest)

        blank = " " * width
        lines: List[str] = []
        for first, last in row_bounds(node_count):
            inverse_row_size = widest // first
            padding = blank * (inverse_row_size - 1)

            parts: List[str] = []
            if self.annotate:
                parts.append(self._label(first, inverse_row_size, widest, markup))
            for index in range(first, last):
                parts.append(f"{padding}{self._cell(index, width, markup)}{padding}{blank}")
            # last node of the row: no trailing spacing
            parts.append(f"{padding}{self._cell(last, width, markup)}")
            lines.append("".join(parts))

        return lines

    def render(self) -> str:
        """Return the whole tree as plain text; empty string for an empty heap."""
        return "".join(line + "\n" for line in self.rows())

    def render_to(self, stream: Optional[TextIO] = None) -> None:
        """Write :meth:`render` to *stream* (default: ``sys.stdout``)."""
        (stream or sys.stdout).write(self.render())

    def print_to(self, console: Console) -> None:
        """Print the summary, a blank line and the tree on a ``rich`` console."""
        # soft_wrap keeps wide bottom rows on one line whatever the console width
        console.print(self.summary(markup=True), soft_wrap=True)
        console.print()
        for line in self.rows(markup=True):
            console.print(line, soft_wrap=True)

    # -------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------
    def _cell(self, index: int, width: int, markup: bool) -> str:
        cell = str(self.heap.get(index)).rjust(width)
        return escape(cell) if markup else cell

    def _label(self, row_size: int, inverse_row_size: int, widest: int, markup: bool) -> str:
        label_width = len(str(widest))
        size = f"{row_size:<{label_width}}"
        inverse = f"{inverse_row_size:<{label_width}}"
        if not markup:
            return f"{size} : {inverse} | "
        return (
            f"[{LABEL_STYLE}]{size}[/] : "
            f"[{LABEL_STYLE}]{inverse}[/] [{DIVIDER_STYLE}]|[/] "
        )
