"""GitHub Flavored Markdown extension building blocks: scanners, tag filter, autolinks, task lists and tables."""

__version__ = "0.1.0"
__all__ = [
    "scanners",
    "tagfilter",
    "autolink",
    "tasklist",
    "table_rows",
    "table_render",
]