from __future__ import annotations

"""
Bounded Literal Scanning.

Small lexical helpers for pulling array and object literals out of
JavaScript source without parsing it: balanced-delimiter matching that
skips string literals and comments, top-level splitting, and single-field
extraction. Anything these helpers cannot match is reported as absent.
"""

import re
from typing import List, Optional

_QUOTES = "'\"`"
_PAIRS = {"[": "]", "{": "}", "(": ")"}

_STRING_LITERAL_RX = re.compile(r"(['\"`])((?:\\.|(?!\1).)*)\1", re.DOTALL)


def find_closing(content: str, open_index: int) -> Optional[int]:
    """
    Index of the delimiter closing the one at open_index.

    Only the opener's own bracket kind is counted. String literals and
    comments are skipped.

    Args:
        content: Source text.
        open_index: Position of ``[``, ``{`` or ``(``.

    Returns:
        Optional[int]: Position of the matching closer, or None if unbalanced.
    """
    opener = content[open_index]
    closer = _PAIRS[opener]
    depth = 0
    i = open_index
    n = len(content)

    while i < n:
        ch = content[i]
        if ch in _QUOTES:
            i = _skip_string(content, i)
            continue
        end = _comment_end(content, i)
        if end is not None:
            i = end
            continue
        if ch == opener:
            depth += 1
        elif ch == closer:
            depth -= 1
            if depth == 0:
                return i
        i += 1

    return None


def balanced_body(content: str, open_index: int) -> Optional[str]:
    """Text strictly between the delimiter at open_index and its closer."""
    close = find_closing(content, open_index)
    if close is None:
        return None
    return content[open_index + 1:close]


def split_top_level_objects(array_body: str) -> List[str]:
    """
    Split the inside of an array literal into its top-level ``{...}`` elements.

    Each returned string includes its braces. Non-object elements are ignored.
    """
    objects: List[str] = []
    i = 0
    n = len(array_body)

    while i < n:
        ch = array_body[i]
        if ch in _QUOTES:
            i = _skip_string(array_body, i)
            continue
        end = _comment_end(array_body, i)
        if end is not None:
            i = end
            continue
        if ch in "[(":
            close = find_closing(array_body, i)
            i = n if close is None else close + 1
            continue
        if ch == "{":
            close = find_closing(array_body, i)
            if close is None:
                break
            objects.append(array_body[i:close + 1])
            i = close + 1
            continue
        i += 1

    return objects


def top_level_text(obj: str) -> str:
    """
    Object literal body with every nested bracketed region blanked out.

    Lets field regexes see only the object's own properties.
    """
    body = obj[1:-1] if obj.startswith("{") and obj.endswith("}") else obj
    return mask_nested(body)


def mask_nested(body: str) -> str:
    """
    Blank the inside of every bracketed region, keeping the delimiters.

    The result has the same length as body, so match offsets carry over.
    """
    out: List[str] = []
    i = 0
    n = len(body)

    while i < n:
        ch = body[i]
        if ch in _QUOTES:
            end = _skip_string(body, i)
            out.append(body[i:end])
            i = end
            continue
        end = _comment_end(body, i)
        if end is not None:
            out.append(re.sub(r"[^\n]", " ", body[i:end]))
            i = end
            continue
        if ch in _PAIRS:
            close = find_closing(body, i)
            if close is None:
                out.append(body[i:])
                break
            out.append(ch + " " * (close - i - 1) + _PAIRS[ch])
            i = close + 1
            continue
        out.append(ch)
        i += 1

    return "".join(out)


def mask_comments(content: str) -> str:
    """
    Blank every comment outside string literals.

    Newlines are kept and the result has the same length as content.
    """
    out: List[str] = []
    i = 0
    n = len(content)

    while i < n:
        ch = content[i]
        if ch in _QUOTES:
            end = _skip_string(content, i)
            out.append(content[i:end])
            i = end
            continue
        end = _comment_end(content, i)
        if end is not None:
            out.append(re.sub(r"[^\n]", " ", content[i:end]))
            i = end
            continue
        out.append(ch)
        i += 1

    return "".join(out)


def string_field(obj_text: str, name: str) -> Optional[str]:
    """Value of ``name: 'literal'`` (any quote style), or None."""
    m = re.search(rf"(?<![\w$]){re.escape(name)}\s*:\s*(['\"`])((?:\\.|(?!\1).)*)\1", obj_text)
    return m.group(2) if m else None


def string_literals(text: str) -> List[str]:
    """All quoted string literal values in text, in order."""
    return [m.group(2) for m in _STRING_LITERAL_RX.finditer(text)]


def _skip_string(content: str, start: int) -> int:
    """Index just past the string literal starting at start."""
    quote = content[start]
    i = start + 1
    n = len(content)
    while i < n:
        ch = content[i]
        if ch == "\\":
            i += 2
            continue
        if ch == quote:
            return i + 1
        # Plain quotes cannot span lines; treat a newline as the end
        if ch == "\n" and quote != "`":
            return i
        i += 1
    return n


def _comment_end(content: str, start: int) -> Optional[int]:
    """Index just past a comment starting at start, or None if there is none."""
    if content.startswith("//", start):
        nl = content.find("\n", start)
        return len(content) if nl == -1 else nl
    if content.startswith("/*", start):
        end = content.find("*/", start + 2)
        return len(content) if end == -1 else end + 2
    return None
