import pytest

from gfmkit.table_rows import (
    Alignment,
    Table,
    TableOptions,
    open_table,
    parse_alignments,
    parse_row,
    unescape_pipes,
)

SPANS = TableOptions(spans=True)


def contents(row):
    return [cell.content for cell in row.cells]


def make_table(options=None):
    table = open_table("| a | b |\n", "| --- | --- |\n", options)
    assert table is not None
    return table


def test_unescape_pipes_replaces_escaped_pipe():
    assert unescape_pipes("a \\| b") == "a | b"


def test_unescape_pipes_keeps_other_backslashes():
    assert unescape_pipes("x\\y") == "x\\y"
    assert unescape_pipes("\\\\|") == "\\|"


def test_parse_row_with_outer_pipes():
    row = parse_row("| a | b |\n")
    assert contents(row) == ["a", "b"]


def test_parse_row_without_outer_pipes_or_newline():
    row = parse_row("a | b")
    assert contents(row) == ["a", "b"]


def test_parse_row_single_cell():
    row = parse_row("abc\n")
    assert contents(row) == ["abc"]


def test_parse_row_empty_is_none():
    assert parse_row("") is None


def test_parse_row_escaped_pipe_stays_in_cell():
    row = parse_row("a \\| b | c\n")
    assert contents(row) == ["a | b", "c"]


def test_parse_row_after_paragraph_text():
    text = "intro text\n| a | b |\n"
    row = parse_row(text)
    assert contents(row) == ["a", "b"]
    assert row.paragraph_offset == len("intro text\n")


def test_parse_row_internal_offset_counts_leading_spaces():
    row = parse_row("|  a |\n")
    cell = row.cells[0]
    assert cell.start_offset + cell.internal_offset == len("|  ")
    assert row.cells[0].content == "a"


def test_parse_alignments():
    row = parse_row("| :-- | :-: | --: | --- |\n")
    assert parse_alignments(row) == [
        Alignment.LEFT,
        Alignment.CENTER,
        Alignment.RIGHT,
        Alignment.NONE,
    ]


def test_open_table_builds_header():
    table = make_table()
    assert table.n_columns == 2
    header = table.rows[0]
    assert header.is_header
    assert header.type_string == "table_header"
    assert contents(header) == ["a", "b"]
    assert [cell.index for cell in header.cells] == [0, 1]
    assert table.preceding_paragraph is None


def test_open_table_keeps_preceding_paragraph():
    table = open_table("Some words\n| a | b |\n", "|---|---|\n")
    assert table.preceding_paragraph == "Some words"
    assert contents(table.rows[0]) == ["a", "b"]


def test_open_table_column_mismatch():
    assert open_table("| a | b | c |\n", "| --- | --- |\n") is None


def test_open_table_requires_delimiter_row():
    assert open_table("| a | b |\n", "| x | y |\n") is None


def test_open_table_indented_delimiter():
    table = open_table("a | b\n", "  :-- | --:\n")
    assert table.alignments == [Alignment.LEFT, Alignment.RIGHT]


def test_add_row_fills_missing_cells():
    table = make_table()
    row = table.add_row("| x |\n")
    assert contents(row) == ["x", ""]
    assert [cell.filler for cell in row.cells] == [False, True]
    assert [cell.index for cell in row.cells] == [0, 1]
    assert table.autocompleted_cells() == 1


def test_add_row_drops_extra_cells():
    table = make_table()
    row = table.add_row("| x | y | z |\n")
    assert contents(row) == ["x", "y"]
    assert table.autocompleted_cells() == 0
    assert row.type_string == "table_row"


def test_add_row_rejects_blank_line():
    table = make_table()
    assert table.add_row("   \n") is None
    assert len(table.rows) == 1


def test_colspan_from_empty_cell():
    row = parse_row("| a || b |\n", SPANS)
    assert [cell.colspan for cell in row.cells] == [2, 0, 1]


def test_no_colspan_without_spans_option():
    row = parse_row("| a || b |\n")
    assert all(cell.colspan == 1 for cell in row.cells)


def test_rowspan_marker_extends_cell_above():
    table = make_table(SPANS)
    first = table.add_row("| x | y |\n")
    second = table.add_row("| ^ | z |\n")
    assert first.cells[0].rowspan == 2
    assert second.cells[0].rowspan == 0
    assert second.cells[0].content == ""
    assert first.cells[1].rowspan == 1


def test_rowspan_ditto_marker():
    table = make_table(TableOptions(spans=True, rowspan_ditto=True))
    first = table.add_row("| x | y |\n")
    second = table.add_row('| " | z |\n')
    assert first.cells[0].rowspan == 2
    assert second.cells[0].content == ""


def test_caret_is_plain_text_without_spans():
    table = make_table()
    table.add_row("| x | y |\n")
    second = table.add_row("| ^ | z |\n")
    assert second.cells[0].content == "^"
    assert second.cells[0].rowspan == 1


def test_table_direct_construction_counts():
    table = Table(alignments=[Alignment.NONE, Alignment.NONE, Alignment.NONE])
    table.add_row("a\n")
    table.add_row("b | c\n")
    assert len(table.rows) == 2
    assert table.autocompleted_cells() == 3


@pytest.mark.parametrize("line", ["| a | b |\n", "a|b\n", "| a | b"])
def test_parsed_cells_match_column_count(line):
    table = make_table()
    row = table.add_row(line)
    assert len(row.cells) == table.n_columns
    assert table.autocompleted_cells() == 0