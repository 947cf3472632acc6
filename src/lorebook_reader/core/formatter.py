# -*- coding: utf-8 -*-
"""
src/lorebook_reader/core/formatter.py

Turns a `LoreBook` into readable text.

Recognized lines are raw screen rows. Joining them back into prose uses a few
simple rules: a row ending a sentence is followed by a line break, a blank
row is a paragraph break, a "---" row (a horizontal rule in the book) is
dropped, and all other rows are joined with spaces. Runs of three or more
breaks collapse into a single paragraph break.

Rows are taken page by page: the whole left column, then the whole right
column.
"""

import html
import re
from typing import Iterable, Tuple

from .models import LoreBook

HORIZONTAL_RULE = "---"
NO_TITLE = "Couldn't read title"

_SENTENCE_END = re.compile(r"[.!?]$")


def _join_lines(lines: Iterable[str], br: str) -> str:
    pieces = []
    for line in lines:
        if _SENTENCE_END.search(line):
            pieces.append(line + br)
        elif line == "":
            pieces.append(f"{br} {br}")
        elif line == HORIZONTAL_RULE:
            pieces.append("")
        else:
            pieces.append(line)
    text = " ".join(pieces)
    collapse = re.compile(rf"(?:{re.escape(br)}\s*){{3,}}")
    return collapse.sub(f"{br} {br}", text)


def _reading_order(book: LoreBook) -> Tuple[str, ...]:
    """The left page is read before the right page."""
    return book.left_column + book.right_column


def format_page_numbers(book: LoreBook) -> str:
    """"L - R" when both page numbers are present, otherwise whichever is."""
    if book.page_left and book.page_right:
        return f"{book.page_left} - {book.page_right}"
    return book.page_left or book.page_right or ""


def format_title(book: LoreBook) -> str:
    return book.title.upper() if book.title else NO_TITLE


def format_text(book: LoreBook) -> str:
    """Plain-text rendering, suitable for the clipboard."""
    body = _join_lines(_reading_order(book), "\n")
    body = re.sub(r"[ \t]*\n[ \t]*", "\n", body).strip()
    return f"{format_title(book)}\nPage(s): {format_page_numbers(book)}\n\n{body}\n"


def format_html(book: LoreBook) -> str:
    """Rich-text rendering for the results window."""
    body = _join_lines((html.escape(line) for line in _reading_order(book)), "<br>")
    return (
        f"<h2>{html.escape(format_title(book))}</h2>"
        f"<h3>Page(s): {html.escape(format_page_numbers(book))}</h3>"
        f"<p>{body}</p>"
    )
