import pytest

from gfmkit.scanners import (
    scan_table_cell,
    scan_table_cell_end,
    scan_table_row_end,
    scan_table_start,
    scan_tasklist,
)


@pytest.mark.parametrize(
    "line",
    [
        "|---|---|\n",
        "| :-- | --: |\n",
        "---|:-:\n",
        ":---:\n",
        "- | -\r\n",
        "|-|\t\n",
    ],
)
def test_table_start_matches_whole_line(line):
    assert scan_table_start(line, 0) == len(line)
    assert scan_table_start(line.encode(), 0) == len(line)


@pytest.mark.parametrize(
    "line",
    ["abc\n", "|---|", "::-\n", ":-:-\n", "||---\n", "| x |\n", "\n", "  |---|\n"],
)
def test_table_start_rejects(line):
    assert scan_table_start(line, 0) == 0


def test_table_start_with_offset():
    prefix = "    "
    line = "|--|\n"
    data = "xx" + prefix[:0] + line
    assert scan_table_start(data, 2) == len(line)


def test_offset_at_or_past_end_is_zero():
    assert scan_table_start("|---|\n", 6) == 0
    assert scan_table_cell("abc", 3) == 0
    assert scan_tasklist("- [ ] ", 100) == 0


def test_negative_offset_raises():
    with pytest.raises(ValueError):
        scan_table_cell("abc", -1)


def test_wrong_type_raises():
    with pytest.raises(TypeError):
        scan_table_cell(42, 0)


@pytest.mark.parametrize(
    "data, cell",
    [
        ("abc|def", "abc"),
        ("a\\|b|c", "a\\|b"),
        ("abc\n", "abc"),
        ("abc\r\n", "abc"),
        (" x \\ y |", " x \\ y "),
        ("\\\\|z", "\\\\|z"),
    ],
)
def test_table_cell(data, cell):
    assert scan_table_cell(data, 0) == len(cell)
    assert scan_table_cell(data.encode(), 0) == len(cell)


@pytest.mark.parametrize("data", ["|x", "\n", "\r\n"])
def test_table_cell_empty(data):
    assert scan_table_cell(data, 0) == 0


def test_table_cell_counts_bytes_for_utf8():
    text = "héllo|"
    assert scan_table_cell(text, 0) == len("héllo")
    assert scan_table_cell(text.encode("utf-8"), 0) == len("héllo".encode("utf-8"))


def test_table_cell_stops_at_invalid_utf8():
    assert scan_table_cell(b"ab\xffcd", 0) == len(b"ab")
    assert scan_table_cell(b"\xff", 0) == 0
    assert scan_table_cell(b"\xc3(", 0) == 0


def test_table_cell_end():
    assert scan_table_cell_end("|   x", 0) == len("|   ")
    assert scan_table_cell_end("|\t\x0b\x0c y", 0) == len("|\t\x0b\x0c ")
    assert scan_table_cell_end("x|", 0) == 0
    assert scan_table_cell_end("x|", 1) == 1


@pytest.mark.parametrize("data", ["  \n", "\r\n", "\n", "\t \r\n"])
def test_table_row_end_matches(data):
    assert scan_table_row_end(data, 0) == len(data)


@pytest.mark.parametrize("data", ["\r", " x\n", "x", "   "])
def test_table_row_end_rejects(data):
    assert scan_table_row_end(data, 0) == 0


@pytest.mark.parametrize(
    "line, marker",
    [
        ("- [ ] foo", "- [ ] "),
        ("  * [x] bar", "  * [x] "),
        ("+ [X]\tbaz", "+ [X]\t"),
        ("1. [X] y", "1. [X] "),
        ("1) [x] y", "1) [x] "),
        ("12. [ ] a", "12. [ ] "),
        ("12 [ ] a", "12 [ ] "),
        ("- [ ]  \t", "- [ ]  \t"),
    ],
)
def test_tasklist_matches(line, marker):
    assert scan_tasklist(line, 0) == len(marker)
    assert scan_tasklist(line.encode(), 0) == len(marker)


@pytest.mark.parametrize(
    "line",
    ["- [x]foo", "-[x] a", "- [y] a", "- [x]", "1 [x] a", "[x] a", "a. [x] b", "- x [x] a"],
)
def test_tasklist_rejects(line):
    assert scan_tasklist(line, 0) == 0


def test_tasklist_multibyte_delimiter_in_bytes():
    line = "1é [x] z"
    marker = "1é [x] "
    assert scan_tasklist(line, 0) == len(marker)
    assert scan_tasklist(line.encode("utf-8"), 0) == len(marker.encode("utf-8"))
    assert scan_tasklist(b"1\xff [x] z", 0) == 0


@pytest.mark.parametrize(
    "scanner",
    [scan_table_start, scan_table_cell, scan_table_cell_end, scan_table_row_end, scan_tasklist],
)
@pytest.mark.parametrize(
    "data",
    ["|--|--|\n", "a | b\n", "| x\n", "  \n", "- [ ] x", "3. [x] y", "", "::"],
)
def test_str_and_bytes_agree_on_ascii(scanner, data):
    assert scanner(data, 0) == scanner(data.encode("ascii"), 0)
    assert scanner(data, 0) == scanner(bytearray(data.encode("ascii")), 0)


@pytest.mark.parametrize("scanner", [scan_table_cell, scan_table_cell_end, scan_tasklist])
def test_match_never_exceeds_remaining_length(scanner):
    data = "| a\\|b | - [x] c |\n"
    for offset in range(len(data)):
        result = scanner(data, offset)
        assert 0 <= result <= len(data) - offset