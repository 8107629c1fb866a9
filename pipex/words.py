"""Splitting of a command string into program name and arguments."""

from __future__ import annotations

_QUOTES = "'\""


def _read_word(text: str, pos: int) -> tuple[str, int]:
    """Read one word starting at ``pos``; return it and the position after it."""
    quote = text[pos]
    if quote in _QUOTES:
        start = pos + 1
        end = text.find(quote, start)
        if end == -1:
            return text[start:], len(text)
        return text[start:end], end + 1
    end = pos
    while end < len(text) and text[end] != " " and text[end] not in _QUOTES:
        end += 1
    return text[pos:end], end


def split_command(text: str) -> list[str]:
    """Split ``text`` on spaces, keeping quoted runs together.

    A word opened by a single or double quote runs up to the next quote of
    the same kind (or the end of the text) and the quotes are dropped.  An
    unquoted word stops at a space or at any quote character.  Only the
    space character separates words.
    """
    words: list[str] = []
    pos = 0
    while pos < len(text):
        while pos < len(text) and text[pos] == " ":
            pos += 1
        if pos >= len(text):
            break
        word, pos = _read_word(text, pos)
        words.append(word)
    return words