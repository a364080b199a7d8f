#!/usr/bin/env python3
# -*- coding: utf-8 -*-


HEX_DIGITS = "0123456789ABCDEFabcdef"
HEX_PREFIX = "0x"

U64_MAX = 0xFFFFFFFFFFFFFFFF

SPACE_WIDTHS = {
    ' ':  1,
    '\t': 4
}


class TextSpan:
    """
    Borrowed view of `src[pos:end]`.

    Records never copy text out of the map file, they keep spans into
    it. A span compares equal to another span or to a plain `str`
    holding the same text.
    """

    __slots__ = ("src", "pos", "end")

    def __init__(self, src, pos, end):
        assert 0 <= pos <= end <= len(src)

        self.src = src
        self.pos = pos
        self.end = end

    @property
    def text(self):
        return self.src[self.pos:self.end]

    def __str__(self):
        return self.text

    def __repr__(self):
        return "TextSpan(%r, %d, %d)" % (self.text, self.pos, self.end)

    def __len__(self):
        return self.end - self.pos

    def __eq__(self, other):
        if isinstance(other, TextSpan):
            return self.text == other.text

        if isinstance(other, str):
            return self.text == other

        return NotImplemented

    def __hash__(self):
        return hash(self.text)

    def rstrip(self):
        end = self.end
        while end > self.pos and self.src[end - 1] in SPACE_WIDTHS:
            end -= 1

        return TextSpan(self.src, self.pos, end)


def indexToCoordinates(s, index):
    """
    Returns (line, col) of `index` in `s`, both starting at 1.
    """

    assert 0 <= index <= len(s)

    line = s.count('\n', 0, index) + 1
    col = index - (s.rfind('\n', 0, index) + 1) + 1

    return line, col


def lineBounds(s, index):
    """
    Returns (start, end) of the line containing `index`, without its line ending.
    """

    start = s.rfind('\n', 0, index) + 1
    end = s.find('\n', index)
    if end == -1:
        end = len(s)

    if end > start and s[end - 1] == '\r':
        end -= 1

    return start, end


def matchWord(s, pos, word):
    if s.startswith(word, pos):
        return pos + len(word)

    return None


def readLineEnding(s, pos):
    if s.startswith('\r\n', pos):
        return pos + 2

    if s.startswith('\n', pos):
        return pos + 1

    return None


def isLineEnd(s, pos):
    return pos >= len(s) or readLineEnding(s, pos) is not None


def readSpaces(s, pos):
    """
    Returns (width, pos_after) of the run of spaces and tabs at `pos`.
    A space counts as 1, a tab as 4.
    """

    width = 0
    s_len = len(s)
    space_widths = SPACE_WIDTHS

    while pos < s_len:
        c = s[pos]
        if c not in space_widths:
            break

        width += space_widths[c]
        pos += 1

    return width, pos


def readPath(s, pos):
    # Paths and bare identifiers share a single lexical form
    s_len = len(s)
    while pos < s_len and s[pos] not in (' ', '\r', '\n'):
        pos += 1

    return pos


def readUntil(s, pos, stop):
    """
    Returns the position of `stop` on the current line, or None.
    """

    s_len = len(s)
    while pos < s_len:
        c = s[pos]
        if c == stop:
            return pos

        if c == '\n' or (c == '\r' and s.startswith('\r\n', pos)):
            break

        pos += 1

    return None


def readRestOfLine(s, pos):
    end = s.find('\n', pos)
    if end == -1:
        return len(s)

    if end > pos and s[end - 1] == '\r':
        end -= 1

    return end


def readHexLiteral(s, pos):
    """
    Returns (digits, pos_after) for a '0x' prefixed literal at `pos`.
    `digits` is empty if the prefix is not followed by a hex digit.
    Returns None if there is no '0x' prefix at all.
    """

    pos = matchWord(s, pos, HEX_PREFIX)
    if pos is None:
        return None

    hex_digits = HEX_DIGITS
    s_len = len(s)

    start = pos
    while pos < s_len and s[pos] in hex_digits:
        pos += 1

    return s[start:pos], pos


def resolveU64HexLiteral(digits):
    """
    Returns the value of `digits`, or None if it does not fit in 64 bits.
    """

    assert digits

    value = int(digits, 16)
    if value > U64_MAX:
        return None

    return value
