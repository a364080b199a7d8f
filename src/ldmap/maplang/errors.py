#!/usr/bin/env python3
# -*- coding: utf-8 -*-


from .token import indexToCoordinates


REMAINING_PREVIEW_LEN = 64


class MapParseError(Exception):
    """
    Raised when the map text does not match the grammar.

    `rule` is the innermost grammar rule active at the point of failure,
    `pos` the offset into `src` where matching stopped.
    """

    def __init__(self, rule, pos, src, msg):
        self.rule = rule
        self.pos = pos
        self.src = src
        self.msg = msg

        super().__init__(msg)

    @property
    def coordinates(self):
        return indexToCoordinates(self.src, self.pos)

    @property
    def line(self):
        return self.coordinates[0]

    @property
    def column(self):
        return self.coordinates[1]

    @property
    def remaining(self):
        return self.src[self.pos:self.pos + REMAINING_PREVIEW_LEN]

    def __str__(self):
        line, col = self.coordinates
        return "At line %d, column %d (%s): %s" % (line, col, self.rule, self.msg)


class MalformedNumber(MapParseError):
    def __init__(self, rule, pos, src, digits=None):
        if digits is None:
            msg = "expected hexadecimal literal"

        elif not digits:
            msg = "expected hex digits after '0x'"

        else:
            msg = "expected value to be in range [0, 0xFFFFFFFFFFFFFFFF], received: 0x%s" % digits

        super().__init__(rule, pos, src, msg)

        self.digits = digits


class EmptyToken(MapParseError):
    def __init__(self, rule, pos, src, what="token"):
        super().__init__(rule, pos, src, "expected %s" % what)

        self.what = what


class MissingSection(MapParseError):
    def __init__(self, rule, pos, src, tag):
        super().__init__(rule, pos, src, "expected %r" % tag)

        self.tag = tag


class GrammarMismatch(MapParseError):
    def __init__(self, rule, pos, src, expected=None):
        if expected is None:
            msg = "no alternative matched"

        else:
            msg = "expected %s" % expected

        super().__init__(rule, pos, src, msg)

        self.expected = expected
