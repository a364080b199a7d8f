#!/usr/bin/env python3
# -*- coding: utf-8 -*-


from contextlib import contextmanager

from .errors import EmptyToken
from .errors import GrammarMismatch
from .errors import MalformedNumber
from .errors import MapParseError
from .errors import MissingSection
from . import token


class MapReader:
    """
    Cursor over an immutable map text.

    Rules consume the text through the `expect*` methods, which raise a
    `MapParseError` naming the innermost rule entered with `context()`.
    Backtracking is limited to `saveCursor()` / `restoreCursor()` and to
    `attempt()`, which wraps both around a single rule.
    """

    def __init__(self, text=''):
        self.initialize(text)

    def initialize(self, text=''):
        self.text = text
        self.pos = 0
        self.rules = []

    indexToCoordinates = staticmethod(token.indexToCoordinates)

    @property
    def rule(self):
        if not self.rules:
            return "map"

        return self.rules[-1]

    @contextmanager
    def context(self, rule):
        self.rules.append(rule)
        try:
            yield
        finally:
            self.rules.pop()

    def saveCursor(self):
        return self.pos, len(self.rules)

    def restoreCursor(self, memo):
        self.pos, rules_len = memo
        del self.rules[rules_len:]

    def attempt(self, rule, *args):
        """
        Runs `rule(self, *args)`; on failure rewinds and returns (False, None).
        """

        memo = self.saveCursor()

        try:
            value = rule(self, *args)

        except MapParseError:
            self.restoreCursor(memo)
            return False, None

        return True, value

    def isAtEnd(self):
        return self.pos >= len(self.text)

    def remaining(self):
        return self.text[self.pos:]

    def span(self, pos, end):
        return token.TextSpan(self.text, pos, end)

    def lineAt(self, pos):
        start, end = token.lineBounds(self.text, pos)
        return self.text[start:end]

    ### Errors ###

    def malformedNumber(self, digits=None):
        return MalformedNumber(self.rule, self.pos, self.text, digits)

    def emptyToken(self, what="token"):
        return EmptyToken(self.rule, self.pos, self.text, what)

    def missingSection(self, tag):
        return MissingSection(self.rule, self.pos, self.text, tag)

    def grammarMismatch(self, expected=None):
        return GrammarMismatch(self.rule, self.pos, self.text, expected)

    ### Whitespace and line endings ###

    def skipSpaces(self):
        width, self.pos = token.readSpaces(self.text, self.pos)
        return width

    def readIndent(self):
        return self.skipSpaces()

    def expectSpaces(self):
        width, pos = token.readSpaces(self.text, self.pos)
        if not width:
            raise self.grammarMismatch("space")

        self.pos = pos
        return width

    def expectWrappedSpaces(self):
        """
        Spaces, or a line break followed by indentation (the linker moves
        fields that do not fit after a long name onto the next line).
        """

        width = self.skipSpaces()

        pos = token.readLineEnding(self.text, self.pos)
        if pos is not None:
            self.pos = pos
            return self.expectSpaces()

        if not width:
            raise self.grammarMismatch("space")

        return width

    def atLineEnd(self):
        return token.isLineEnd(self.text, self.pos)

    def expectLineEnding(self):
        pos = token.readLineEnding(self.text, self.pos)
        if pos is None:
            raise self.grammarMismatch("line ending")

        self.pos = pos

    def expectLineEnd(self):
        """
        Line ending, or end of input.
        """

        if self.isAtEnd():
            return

        self.expectLineEnding()

    def skipBlankLines(self):
        """
        Skips lines holding nothing but spaces. Returns the number of lines skipped.
        """

        text = self.text
        text_len = len(text)
        count = 0

        while self.pos < text_len:
            _, pos = token.readSpaces(text, self.pos)
            if pos >= text_len:
                self.pos = pos
                count += 1
                break

            pos = token.readLineEnding(text, pos)
            if pos is None:
                break

            self.pos = pos
            count += 1

        return count

    ### Literals and tokens ###

    def expectTag(self, tag):
        pos = token.matchWord(self.text, self.pos, tag)
        if pos is None or not token.isLineEnd(self.text, pos):
            raise self.missingSection(tag)

        self.pos = pos
        self.expectLineEnd()

    def expectWord(self, word):
        pos = token.matchWord(self.text, self.pos, word)
        if pos is None:
            raise self.grammarMismatch(repr(word))

        self.pos = pos

    def expectChar(self, c):
        if self.text[self.pos:self.pos + 1] != c:
            raise self.grammarMismatch(repr(c))

        self.pos += 1

    def peekHex(self):
        return self.text.startswith(token.HEX_PREFIX, self.pos)

    def expectHex(self):
        ret = token.readHexLiteral(self.text, self.pos)
        if ret is None:
            raise self.malformedNumber()

        digits, pos_after = ret
        if not digits:
            raise self.malformedNumber(digits)

        value = token.resolveU64HexLiteral(digits)
        if value is None:
            raise self.malformedNumber(digits)

        self.pos = pos_after
        return value

    def expectPath(self, what="path"):
        pos = token.readPath(self.text, self.pos)
        if pos == self.pos:
            raise self.emptyToken(what)

        value = self.span(self.pos, pos)
        self.pos = pos
        return value

    def expectName(self, what="name"):
        """
        Path token that is not itself a hex literal.
        """

        if self.peekHex():
            raise self.grammarMismatch(what)

        return self.expectPath(what)

    def expectUntil(self, stop, what="token"):
        """
        Non-empty run of text up to (not including) `stop` on the current line.
        """

        pos = token.readUntil(self.text, self.pos, stop)
        if pos is None:
            raise self.grammarMismatch(repr(stop))

        if pos == self.pos:
            raise self.emptyToken(what)

        value = self.span(self.pos, pos)
        self.pos = pos
        return value

    def restOfLine(self):
        pos = token.readRestOfLine(self.text, self.pos)

        value = self.span(self.pos, pos)
        self.pos = pos
        return value
