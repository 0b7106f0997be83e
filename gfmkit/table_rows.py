"""Parsing of GitHub Flavored Markdown table rows and tables.

A table starts when a paragraph's last line is a header row and the next
line is a delimiter row such as ``| :-- | --: |`` with the same number of
cells.  Each later line is parsed as a body row: missing cells are filled
in with empty filler cells and surplus cells are dropped.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from gfmkit.scanners import (
    scan_table_cell,
    scan_table_cell_end,
    scan_table_row_end,
    scan_table_start,
)

# Limit on filler cells, so that a hostile input cannot make the table huge.
MAX_AUTOCOMPLETED_CELLS = 0x80000
# A row that reaches this many cells is rejected.
MAX_ROW_CELLS = 0xFFFF

_TRIM = " \t\n\f\r"


class Alignment(str, Enum):
    """Column alignment given by the colons of the delimiter row."""

    NONE = ""
    LEFT = "l"
    CENTER = "c"
    RIGHT = "r"


@dataclass(frozen=True)
class TableOptions:
    """Parsing options for tables.

    ``spans`` turns on column spans (empty ``||`` cells) and row spans
    (cells holding only ``^``, or ``"`` when ``rowspan_ditto`` is set).
    """

    spans: bool = False
    rowspan_ditto: bool = False


@dataclass
class Cell:
    """One table cell.

    Offsets are positions in the line the cell was parsed from.  A span of
    0 marks a cell covered by a neighbouring spanning cell.  Filler cells
    complete short rows; their spans always stay 1.
    """

    content: str
    start_offset: int = 0
    end_offset: int = 0
    internal_offset: int = 0
    colspan: int = 1
    rowspan: int = 1
    index: int = 0
    filler: bool = False


@dataclass
class Row:
    """A parsed table row.

    ``paragraph_offset`` is where the row starts when it was found after
    other lines of text; everything before it belongs to a paragraph.
    """

    cells: list[Cell] = field(default_factory=list)
    paragraph_offset: int = 0
    is_header: bool = False

    @property
    def type_string(self) -> str:
        """The node type name of this row."""
        return "table_header" if self.is_header else "table_row"


def unescape_pipes(text: str) -> str:
    """Turn every ``\\|`` into ``|``."""
    return text.replace("\\|", "|")


def _first_nonspace(line: str) -> int:
    return len(line) - len(line.lstrip(" \t"))


def _apply_spans(cell: Cell, cells: list[Cell], options: TableOptions) -> None:
    if cells and not cell.content and cell.start_offset == cell.end_offset:
        cell.colspan = 0
        spanning = None
        for earlier in cells:
            if earlier.colspan > 0:
                spanning = earlier
        if spanning is not None:
            spanning.colspan += 1
    else:
        cell.colspan = 1

    marker = '"' if options.rowspan_ditto else "^"
    cell.rowspan = 0 if cell.content == marker else 1


def parse_row(line: str, options: Optional[TableOptions] = None) -> Optional[Row]:
    """Parse one table row; return None if ``line`` is not a row.

    Cells are separated by unescaped pipes; leading and trailing pipes are
    optional and cells may be empty.  When a complete row is followed by
    more text, the earlier lines are treated as paragraph text and only the
    last line is kept as the row.
    """
    options = options or TableOptions()
    size = len(line)
    row = Row()
    offset = scan_table_cell_end(line, 0)
    expect_more = True

    while offset < size and expect_more:
        cell_matched = scan_table_cell(line, offset)
        pipe_matched = scan_table_cell_end(line, offset + cell_matched)

        if cell_matched or pipe_matched:
            content = unescape_pipes(line[offset:offset + cell_matched]).strip(_TRIM)
            cell = Cell(
                content=content,
                start_offset=offset,
                end_offset=offset + cell_matched - 1 if cell_matched else offset,
            )
            while (
                cell.start_offset > row.paragraph_offset
                and line[cell.start_offset - 1] != "|"
            ):
                cell.start_offset -= 1
                cell.internal_offset += 1

            row.cells.append(cell)
            if options.spans:
                _apply_spans(cell, row.cells, options)

            if len(row.cells) >= MAX_ROW_CELLS:
                return None

        offset += cell_matched + pipe_matched

        if pipe_matched:
            expect_more = True
        else:
            row_end = scan_table_row_end(line, offset)
            offset += row_end
            if row_end and offset != size:
                row.paragraph_offset = offset
                row.cells = []
                offset += scan_table_cell_end(line, offset)
                expect_more = True
            else:
                expect_more = False

    if offset != size or not row.cells:
        return None
    return row


def parse_alignments(row: Row) -> list[Alignment]:
    """Read the column alignments from a parsed delimiter row."""
    alignments = []
    for cell in row.cells:
        text = cell.content
        left = text.startswith(":")
        right = bool(text) and text.endswith(":")
        if left and right:
            alignments.append(Alignment.CENTER)
        elif left:
            alignments.append(Alignment.LEFT)
        elif right:
            alignments.append(Alignment.RIGHT)
        else:
            alignments.append(Alignment.NONE)
    return alignments


@dataclass
class Table:
    """A table: header row first, then body rows.

    ``preceding_paragraph`` holds the text that stood before the header row
    in the same paragraph, if any.
    """

    alignments: list[Alignment]
    options: TableOptions = field(default_factory=TableOptions)
    rows: list[Row] = field(default_factory=list)
    preceding_paragraph: Optional[str] = None
    _row_count: int = field(default=0, repr=False)
    _parsed_cells: int = field(default=0, repr=False)

    @property
    def n_columns(self) -> int:
        """Number of columns, fixed by the header row."""
        return len(self.alignments)

    def _count_row(self, parsed_cells: int) -> None:
        self._row_count += 1
        self._parsed_cells += parsed_cells

    def autocompleted_cells(self) -> int:
        """Number of filler cells added to complete short rows so far."""
        return self.n_columns * self._row_count - self._parsed_cells

    def _spanning_cell(self, column: int) -> Optional[Cell]:
        for previous in reversed(self.rows):
            if column >= len(previous.cells):
                return None
            candidate = previous.cells[column]
            if candidate.rowspan != 0:
                return candidate
        return None

    def add_row(self, line: str) -> Optional[Row]:
        """Parse ``line`` as a body row and append it.

        Returns the new row, or None if the line is blank, is not a row, or
        the table already has too many filler cells.
        """
        start = _first_nonspace(line)
        rest = line[start:]
        if not rest or rest[0] in "\r\n":
            return None
        if self.autocompleted_cells() > MAX_AUTOCOMPLETED_CELLS:
            return None

        parsed = parse_row(rest, self.options)
        if parsed is None:
            return None

        used = parsed.cells[: self.n_columns]

        if self.options.spans:
            for column, cell in enumerate(used):
                if cell.rowspan != 0:
                    continue
                spanning = self._spanning_cell(column)
                if spanning is not None:
                    if not spanning.filler:
                        spanning.rowspan += 1
                    cell.content = ""

        for column, cell in enumerate(used):
            cell.index = column
        self._count_row(len(used))

        cells = list(used)
        cells.extend(
            Cell(content="", index=column, filler=True)
            for column in range(len(used), self.n_columns)
        )
        row = Row(cells=cells, paragraph_offset=parsed.paragraph_offset)
        self.rows.append(row)
        return row


def open_table(
    paragraph: str, delimiter_line: str, options: Optional[TableOptions] = None
) -> Optional[Table]:
    """Start a table from a paragraph's text and the delimiter line after it.

    The last line of ``paragraph`` must be a row with as many cells as the
    delimiter row.  Returns None when no table starts here.
    """
    options = options or TableOptions()
    start = _first_nonspace(delimiter_line)
    if not scan_table_start(delimiter_line, start):
        return None

    delimiter_row = parse_row(delimiter_line[start:], options)
    if delimiter_row is None:
        return None

    header_row = parse_row(paragraph, options)
    if header_row is None or len(header_row.cells) != len(delimiter_row.cells):
        return None

    preceding = None
    if header_row.paragraph_offset:
        preceding = unescape_pipes(paragraph[: header_row.paragraph_offset]).strip(_TRIM)

    table = Table(
        alignments=parse_alignments(delimiter_row),
        options=options,
        preceding_paragraph=preceding,
    )
    for column, cell in enumerate(header_row.cells):
        cell.index = column
    header_row.is_header = True
    table.rows.append(header_row)
    table._count_row(len(header_row.cells))
    return table