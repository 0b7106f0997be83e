# gfmkit

Building blocks for the GitHub Flavored Markdown extensions: pipe tables,
task list items, extended autolinks and the raw HTML tag filter. The package
uses only the standard library.

## Installation

```
pip install gfmkit
```

## Modules

### `gfmkit.scanners`

Low-level line scanners: `scan_table_start`, `scan_table_cell`,
`scan_table_cell_end`, `scan_table_row_end` and `scan_tasklist`. Each takes
a line (`str` or bytes) and an offset, and returns the length of the match
at that offset, or 0 when nothing matches. For bytes, lengths are counted in
bytes, and table cells and task-list markers accept only well-formed UTF-8.
A negative offset raises `ValueError`; any other input type raises
`TypeError`.

### `gfmkit.tagfilter`

Decides which raw HTML tags must not be passed through. `FILTERED_TAGS`
lists them (`title`, `textarea`, `style`, `xmp`, `iframe`, `noembed`,
`noframes`, `script`, `plaintext`). `allows_tag("<script>")` returns
`False`. `is_tag(tag, tagname)` checks a tag against one lower-case name.
The name is matched without regard to ASCII case and must be followed by
whitespace, `>` or `/>`.

### `gfmkit.autolink`

Finds bare links in text.

- `match_www(data, offset)` matches a `www.` link at `data[offset]` and
  returns an `AutolinkMatch` (`url`, `text`, `start`, `end`) or `None`.
- `match_url(data, offset)` matches an `http://`, `https://` or `ftp://`
  URL whose `:` is at `data[offset]`. The scheme letters before the colon
  are included, so `start` lies before `offset`.
- `split_email_links(text)` splits text into `TextSegment` and
  `LinkSegment` parts. It covers plain addresses, which get a `mailto:`
  URL, and explicit `mailto:` and `xmpp:` addresses.
- `autolink_delim`, `check_domain` and `is_safe_url` apply the rules for
  trailing punctuation, unbalanced parentheses, entities, domains and
  schemes.

```python
from gfmkit.autolink import match_www, split_email_links

match_www("see www.example.com.", 4)
# AutolinkMatch(url='http://www.example.com', text='www.example.com', start=4, end=19)

split_email_links("mail someone@example.com now")
# [TextSegment(text='mail '),
#  LinkSegment(url='mailto:someone@example.com', text='someone@example.com'),
#  TextSegment(text=' now')]
```

### `gfmkit.tasklist`

- `parse_task_item(line)` recognises lines such as `- [ ] task` and
  `1. [x] done`. It returns a `TaskItem` with `checked`, `length` (the
  length of the marker, the checkbox and the spaces after it) and
  `type_string`, or `None` when the line has no checkbox.
- `html_open_tag(checked, sourcepos=None)`, `html_close_tag()`,
  `commonmark_marker(checked)` and `xml_attribute(checked)` return the
  markup for each output format.

### `gfmkit.table_rows`

- `parse_row(line, options=None)` splits a row into a `Row` of `Cell`s, or
  returns `None`.
- `parse_alignments(row)` reads `Alignment` values from a delimiter row.
- `open_table(paragraph, delimiter_line, options=None)` builds a `Table`
  when the last line of the paragraph is a header row with as many cells
  as the delimiter row. Any earlier paragraph text is kept in
  `Table.preceding_paragraph`.
- `Table.add_row(line)` appends a body row. Short rows are filled with
  filler cells and surplus cells are dropped. `Table.autocompleted_cells()`
  counts the filler cells. Once it passes `MAX_AUTOCOMPLETED_CELLS`, no
  more rows are added.
- `TableOptions(spans=True)` turns on column spans (empty `||` cells) and
  row spans (cells holding only `^`). With `rowspan_ditto=True`, row spans
  use `"` instead.
- `unescape_pipes(text)` turns `\|` into `|`.

### `gfmkit.table_render`

Renders a `Table` with `render_html(table, prefer_style=False)`,
`render_latex(table)`, `render_man(table)` (tbl, cells separated by `@`) and
`render_commonmark(table, rowspan_ditto=False)`.

- `xml_cell_attribute(table, row, cell)` gives a cell's extra XML attribute
  text.
- `escape_pipe(inside_table, char)` tells whether a character must be
  escaped when Markdown is written.

## Example

```python
from gfmkit.table_rows import open_table
from gfmkit.table_render import render_html

table = open_table("| a | b |\n", "| :- | -: |\n")
table.add_row("| 1 | 2 |\n")
print(render_html(table))
```

## What it does not do

This is not a complete Markdown processor. It does not parse whole
documents into a tree, and it does not parse inline markup inside table
cells. The renderers treat cell contents as plain text and escape them for
the target format. It offers no command-line tool.