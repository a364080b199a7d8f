#!/usr/bin/env python3
# -*- coding: utf-8 -*-


from .objects import ExpressionValue
from .objects import ObjectContribution
from .objects import SectionNode
from .objects import SymbolNode
from .token import readSpaces


def objectContribution(reader):
    size = reader.expectHex()

    source = None
    if not reader.atLineEnd():
        reader.expectSpaces()
        source = reader.restOfLine().rstrip()
        if not len(source):
            source = None

    return ObjectContribution(size, source)


def expressionValue(reader):
    text = reader.restOfLine()
    if not len(text):
        raise reader.emptyToken("symbol value")

    return ExpressionValue(text)


def symbolKind(reader):
    """
    The body after a symbol address is an object contribution if and only
    if it opens with a second hex literal; anything else is the text of a
    linker script expression. A value that itself starts with '0x' is
    therefore read as a contribution.
    """

    is_valid, kind = reader.attempt(objectContribution)
    if is_valid:
        return kind

    return expressionValue(reader)


class Symbol:
    @classmethod
    def parse(cls, reader):
        # <indent> 0x<addr> <spaces> (0x<size> [source] | value)
        # [<spaces> 0x<addr> <spaces> name]
        with reader.context("symbol"):
            indent = reader.readIndent()
            addr = reader.expectHex()
            reader.expectSpaces()
            kind = symbolKind(reader)
            reader.expectLineEnd()

            is_valid, name = cls.nameLine(reader, addr)

        return SymbolNode(addr, kind, name, indent)

    @staticmethod
    def nameLine(reader, addr):
        memo = reader.saveCursor()

        is_valid, ret = reader.attempt(Symbol.nameLineBody)
        if is_valid:
            addr_name, name = ret
            if addr_name == addr:
                return True, name

        reader.restoreCursor(memo)
        return False, None

    @staticmethod
    def nameLineBody(reader):
        with reader.context("symbol name"):
            reader.expectSpaces()
            addr = reader.expectHex()
            reader.expectSpaces()
            name = reader.expectPath("symbol name")
            reader.skipSpaces()
            reader.expectLineEnd()

        return addr, name

    @classmethod
    def many(cls, reader):
        symbols = []

        while True:
            is_valid, symbol = reader.attempt(cls.parse)
            if not is_valid:
                break

            symbols.append(symbol)

        return tuple(symbols)


class Section:
    @classmethod
    def parse(cls, reader):
        """
        [label line] [header line] { symbol }*

        Header resolution, tried in order:
        * label line followed by a header line; a header line without
          a name takes its name from the label,
        * header line alone,
        * label line alone (pattern that placed nothing),
        * no header.
        """

        with reader.context("section"):
            start_pos = reader.pos
            indent, _ = readSpaces(reader.text, start_pos)

            name = addr = size = source = load_addr = None

            is_valid, label = reader.attempt(cls.labelLine)
            if is_valid:
                is_valid, header = reader.attempt(cls.headerLine, True)

            else:
                is_valid, header = reader.attempt(cls.headerLine, False)

            if is_valid:
                name, addr, size, source, load_addr = header
                if name is None:
                    name = label

            symbols = Symbol.many(reader)

            if reader.pos == start_pos:
                raise reader.grammarMismatch()

        return SectionNode(name, addr, size, source, symbols, label, load_addr, indent)

    @staticmethod
    def labelLine(reader):
        # *(.text*)
        with reader.context("section label"):
            reader.readIndent()
            label = reader.expectName("section label")
            reader.skipSpaces()
            reader.expectLineEnd()

        return label

    @staticmethod
    def headerLine(reader, name_optional):
        # <name> 0x<addr> 0x<size> [load address 0x<lma> | source]
        with reader.context("section header"):
            reader.readIndent()

            name = None
            if not (name_optional and reader.peekHex()):
                name = reader.expectName("section name")
                reader.expectSpaces()

            addr = reader.expectHex()
            reader.expectSpaces()
            size = reader.expectHex()

            source = load_addr = None
            if not reader.atLineEnd():
                reader.expectSpaces()

                is_valid, load_addr = reader.attempt(Section.loadAddress)
                if not is_valid:
                    source = reader.restOfLine().rstrip()
                    if not len(source):
                        source = None

            reader.expectLineEnd()

        return name, addr, size, source, load_addr

    @staticmethod
    def loadAddress(reader):
        # Output section placed at a different load address (LMA)
        reader.expectWord("load address")
        reader.expectSpaces()
        load_addr = reader.expectHex()
        reader.skipSpaces()
        if not reader.atLineEnd():
            raise reader.grammarMismatch("end of line")

        return load_addr

    @classmethod
    def many(cls, reader):
        sections = []

        while True:
            reader.skipBlankLines()
            if reader.isAtEnd():
                break

            is_valid, section = reader.attempt(cls.parse)
            if not is_valid:
                break

            sections.append(section)

        return tuple(sections)
