"""Pure text rewrites applied to a file before include scanning."""

import re

# Whole directive line, terminator included.
PRAGMA_ONCE_RE = re.compile(r"^[ \t]*#pragma[ \t]+once\b[^\n]*(?:\n|$)", re.MULTILINE)
BLOCK_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)
LINE_COMMENT_RE = re.compile(r"//[^\r\n]*")


def strip_once_directive(text: str) -> tuple[str, bool]:
    """Remove every ``#pragma once`` line.

    Returns the remaining text and whether at least one directive was found.
    """
    stripped, count = PRAGMA_ONCE_RE.subn("", text)
    return stripped, count > 0


def strip_block_comments(text: str) -> str:
    return BLOCK_COMMENT_RE.sub("", text)


def strip_line_comments(text: str) -> str:
    return LINE_COMMENT_RE.sub("", text)


def strip_comments(text: str) -> str:
    # Block comments first: a "//" inside /* */ must not eat the closer.
    return strip_line_comments(strip_block_comments(text))
