"""Rendering of parsed tables to HTML, LaTeX, man (tbl), XML attributes and Markdown.

Cell contents are treated as plain text and escaped for the target format.
Cells with a span of 0 are fillers covered by a neighbouring spanning cell.
HTML leaves their tags out, and Markdown marks them the way they were
written.
"""

from __future__ import annotations

from typing import Optional

from gfmkit.table_rows import Alignment, Cell, Row, Table

_HTML_ALIGN_NAMES = {
    Alignment.LEFT: "left",
    Alignment.CENTER: "center",
    Alignment.RIGHT: "right",
}

_COMMONMARK_DELIMITERS = {
    Alignment.NONE: " --- |",
    Alignment.LEFT: " :-- |",
    Alignment.CENTER: " :-: |",
    Alignment.RIGHT: " --: |",
}

_LATEX_COLUMNS = {
    Alignment.NONE: "l",
    Alignment.LEFT: "l",
    Alignment.CENTER: "c",
    Alignment.RIGHT: "r",
}

_MAN_COLUMNS = {
    Alignment.NONE: "c",
    Alignment.LEFT: "l",
    Alignment.CENTER: "c",
    Alignment.RIGHT: "r",
}

_LATEX_ESCAPES = {
    "{": "\\{",
    "}": "\\}",
    "#": "\\#",
    "%": "\\%",
    "&": "\\&",
    "$": "\\$",
    "_": "\\_",
    "~": "\\textasciitilde{}",
    "^": "\\^{}",
    "\\": "\\textbackslash{}",
    "|": "\\textbar{}",
    "<": "\\textless{}",
    ">": "\\textgreater{}",
    "[": "{[}",
    "]": "{]}",
    '"': "\\textquotedbl{}",
    "'": "\\textquotesingle{}",
}

_HTML_ESCAPES = {"&": "&amp;", "<": "&lt;", ">": "&gt;", '"': "&quot;"}


class _Output:
    """Text accumulator whose ``cr`` starts a new line only when needed."""

    def __init__(self) -> None:
        self._parts: list[str] = []

    def put(self, text: str) -> None:
        if text:
            self._parts.append(text)

    def cr(self) -> None:
        if self._parts and not self._parts[-1].endswith("\n"):
            self._parts.append("\n")

    def getvalue(self) -> str:
        return "".join(self._parts)


def _html_escape(text: str) -> str:
    return "".join(_HTML_ESCAPES.get(char, char) for char in text)


def _latex_escape(text: str) -> str:
    return "".join(_LATEX_ESCAPES.get(char, char) for char in text)


def _man_escape(text: str) -> str:
    escaped = text.replace("\\", "\\e").replace("-", "\\-")
    if escaped.startswith((".", "'")):
        escaped = "\\&" + escaped
    return escaped


def _cell_alignment(table: Table, cell: Cell) -> Alignment:
    # Filler cells carry no column data, so they are never aligned.
    if cell.filler or not 0 <= cell.index < len(table.alignments):
        return Alignment.NONE
    return table.alignments[cell.index]


def _html_align(alignment: Alignment, prefer_style: bool) -> str:
    name = _HTML_ALIGN_NAMES.get(alignment)
    if name is None:
        return ""
    if prefer_style:
        return f' style="text-align: {name}"'
    return f' align="{name}"'


def _html_spans(cell: Cell) -> str:
    spans = ""
    if cell.colspan > 1:
        spans += f' colspan="{cell.colspan}"'
    if cell.rowspan > 1:
        spans += f' rowspan="{cell.rowspan}"'
    return spans


def render_html(table: Table, prefer_style: bool = False) -> str:
    """Render ``table`` as an HTML ``<table>`` with ``<thead>`` and ``<tbody>``.

    With ``prefer_style`` alignment is written as a ``style`` attribute
    instead of ``align``.
    """
    out = _Output()
    out.cr()
    out.put("<table>")
    need_closing_body = False

    for row in table.rows:
        out.cr()
        if row.is_header:
            out.put("<thead>")
            out.cr()
        elif not need_closing_body:
            out.put("<tbody>")
            out.cr()
            need_closing_body = True
        out.put("<tr>")

        tag = "th" if row.is_header else "td"
        for cell in row.cells:
            visible = cell.colspan > 0 and cell.rowspan > 0
            if visible:
                out.cr()
                align = _html_align(_cell_alignment(table, cell), prefer_style)
                out.put(f"<{tag}{align}{_html_spans(cell)}>")
            out.put(_html_escape(cell.content))
            if visible:
                out.put(f"</{tag}>")

        out.cr()
        out.put("</tr>")
        if row.is_header:
            out.cr()
            out.put("</thead>")

    if need_closing_body:
        out.cr()
        out.put("</tbody>")
        out.cr()
    out.cr()
    out.put("</table>")
    out.cr()
    return out.getvalue()


def render_latex(table: Table) -> str:
    """Render ``table`` as a LaTeX ``tabular`` inside a ``table`` environment."""
    columns = "".join(_LATEX_COLUMNS[alignment] for alignment in table.alignments)
    lines = ["\\begin{table}", f"\\begin{{tabular}}{{{columns}}}"]
    for row in table.rows:
        rendered = [_latex_escape(cell.content) for cell in row.cells]
        lines.append(" & ".join(rendered) + " \\\\")
    lines.extend(["\\end{tabular}", "\\end{table}"])
    return "\n".join(lines) + "\n"


def render_man(table: Table) -> str:
    """Render ``table`` as a tbl block for man pages, cells separated by ``@``."""
    lines = [".TS", "tab(@);"]
    if table.alignments:
        columns = "".join(_MAN_COLUMNS[alignment] for alignment in table.alignments)
        lines.append(columns + ".")
    for row in table.rows:
        lines.append("@".join(_man_escape(cell.content) for cell in row.cells))
    lines.append(".TE")
    return "\n".join(lines) + "\n"


def _commonmark_row(row: Row, rowspan_ditto: bool) -> str:
    marker = '"' if rowspan_ditto else "^"
    text = "|"
    for cell in row.cells:
        if cell.colspan > 0:
            text += " "
            if cell.rowspan == 0:
                text += marker
        text += "".join("\\|" if escape_pipe(False, char) else char for char in cell.content)
        if cell.colspan > 0:
            text += " "
        text += "|"
    return text


def render_commonmark(table: Table, rowspan_ditto: bool = False) -> str:
    """Render ``table`` back to Markdown table syntax.

    Pipes inside cells are escaped.  Row-span filler cells are written as
    ``^``, or ``"`` with ``rowspan_ditto``.
    """
    lines = []
    for row in table.rows:
        lines.append(_commonmark_row(row, rowspan_ditto))
        if row.is_header and row.cells:
            lines.append(
                "|" + "".join(_COMMONMARK_DELIMITERS[a] for a in table.alignments)
            )
    return "\n".join(lines) + "\n"


def xml_cell_attribute(table: Table, row: Row, cell: Cell) -> Optional[str]:
    """Return the extra XML attribute text for ``cell`` in ``row``, or None.

    Header cells report their alignment; body cells report span markers.
    """
    if row.is_header:
        name = _HTML_ALIGN_NAMES.get(_cell_alignment(table, cell))
        return f' align="{name}"' if name else None
    if cell.colspan == 0:
        return " colspan_filler"
    if cell.rowspan == 0:
        return " rowspan_filler"
    if cell.colspan > 1 and cell.rowspan > 1:
        return " colspan rowspan"
    if cell.colspan > 1:
        return " colspan"
    if cell.rowspan > 1:
        return " rowspan"
    return None


def escape_pipe(inside_table: bool, char: str) -> bool:
    """Tell whether ``char`` must be backslash-escaped when writing Markdown.

    ``inside_table`` is True when the node being written is the table, a
    row or a cell itself rather than text within a cell.
    """
    return not inside_table and char == "|"