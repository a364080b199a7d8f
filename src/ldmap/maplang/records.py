#!/usr/bin/env python3
# -*- coding: utf-8 -*-


from .objects import ArchiveReference
from .objects import DiscardedSection
from .objects import LoadedFile
from .objects import MemoryRegion


def parseBlock(reader, rule, tag, item, header=None):
    """
    tag line, blank lines, [header row, blank lines], { item line }*, blank lines

    The tag is mandatory; the items end at the first line `item` does
    not match, which is left unconsumed.
    """

    with reader.context(rule):
        reader.expectTag(tag)
        reader.skipBlankLines()

        if header is not None:
            header(reader)
            reader.skipBlankLines()

        items = []

        while True:
            is_valid, value = reader.attempt(itemLine, item)
            if not is_valid:
                break

            items.append(value)

        reader.skipBlankLines()

    return tuple(items)


def itemLine(reader, item):
    value = item(reader)
    reader.expectLineEnd()
    return value


def parseParenthesized(reader, what):
    reader.expectChar('(')
    value = reader.expectUntil(')', what)
    reader.expectChar(')')
    return value


class ArchiveReferenceBlock:
    TAG = "Archive member included to satisfy reference by file (symbol)"

    @classmethod
    def start(cls, reader):
        return parseBlock(reader, "references", cls.TAG, cls.item)

    @classmethod
    def item(cls, reader):
        # archive(member)
        #         object (symbol)
        with reader.context("reference"):
            archive = reader.expectUntil('(', "archive path")
            parseParenthesized(reader, "archive member")  # Not retained
            reader.skipSpaces()
            reader.expectLineEnding()

            reader.expectSpaces()
            obj, symbol = cls.objectAndSymbol(reader)
            reader.skipSpaces()

        return ArchiveReference(archive, obj, symbol)

    @staticmethod
    def objectAndSymbol(reader):
        memo = reader.saveCursor()

        obj = reader.expectPath("object path")
        reader.skipSpaces()
        if reader.text.startswith('(', reader.pos):
            symbol = parseParenthesized(reader, "symbol")
            return obj, symbol

        # No space between the object and the symbol: the path token
        # swallowed the parenthesized symbol
        obj_text = obj.text
        paren = obj_text.rfind('(')
        if paren <= 0 or not obj_text.endswith(')') or paren == len(obj_text) - 2:
            raise reader.grammarMismatch("'('")

        end = obj.end
        reader.restoreCursor(memo)

        obj = reader.span(obj.pos, obj.pos + paren)
        symbol = reader.span(obj.end + 1, end - 1)
        reader.pos = end

        return obj, symbol


class DiscardedSectionBlock:
    TAG = "Discarded input sections"

    @classmethod
    def start(cls, reader):
        return parseBlock(reader, "discarded sections", cls.TAG, cls.item)

    @staticmethod
    def item(reader):
        with reader.context("discarded section"):
            reader.skipSpaces()
            group = reader.expectName("section group")
            reader.expectWrappedSpaces()
            addr = reader.expectHex()
            reader.expectSpaces()
            size = reader.expectHex()
            reader.expectChar(' ')

            # Verbatim, may contain spaces
            source = reader.restOfLine()
            if not len(source):
                raise reader.emptyToken("source path")

        return DiscardedSection(group, addr, size, source)


class MemoryConfigurationBlock:
    TAG = "Memory Configuration"
    HEADER = ("Name", "Origin", "Length", "Attributes")

    @classmethod
    def start(cls, reader):
        return parseBlock(reader, "memory configuration", cls.TAG, cls.item, cls.header)

    @classmethod
    def header(cls, reader):
        with reader.context("memory header"):
            is_valid, _ = reader.attempt(cls.headerRow)
            if not is_valid:
                raise reader.missingSection(' '.join(cls.HEADER))

    @classmethod
    def headerRow(cls, reader):
        column_names = cls.HEADER

        reader.expectWord(column_names[0])
        for column_name in column_names[1:]:
            reader.expectSpaces()
            reader.expectWord(column_name)

        reader.skipSpaces()
        reader.expectLineEnd()

    @staticmethod
    def item(reader):
        with reader.context("memory region"):
            name = reader.expectPath("region name")
            reader.expectSpaces()
            origin = reader.expectHex()
            reader.expectSpaces()
            length = reader.expectHex()

            # Absent column -> None, present but blank -> empty span
            attrs = None
            if reader.skipSpaces():
                attrs = reader.restOfLine()

        return MemoryRegion(name, origin, length, attrs)


class LoadedFileRecord:
    TAG = "LOAD"

    @classmethod
    def item(cls, reader):
        with reader.context("load"):
            reader.expectWord(cls.TAG)
            reader.expectSpaces()
            path = reader.expectPath()
            reader.skipSpaces()

        return LoadedFile(path)

    @classmethod
    def many(cls, reader):
        files = []

        while True:
            is_valid, loaded = reader.attempt(itemLine, cls.item)
            if not is_valid:
                break

            files.append(loaded)

        return tuple(files)
