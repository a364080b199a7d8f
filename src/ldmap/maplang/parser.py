#!/usr/bin/env python3
# -*- coding: utf-8 -*-


from .objects import Document
from .reader import MapReader
from .records import ArchiveReferenceBlock
from .records import DiscardedSectionBlock
from .records import LoadedFileRecord
from .records import MemoryConfigurationBlock
from .sections import Section


class MapGrammar:
    MARKER = "Linker script and memory map"

    @classmethod
    def parse(cls, text):
        """
        Parses the whole map `text` into a `Document`.

        Raises a `MapParseError` if one of the mandatory blocks or the
        memory map marker is missing. Content after the last section
        node that matches no rule is returned as `Document.tail`.
        """

        reader = MapReader(text)
        return cls.start(reader)

    @classmethod
    def start(cls, reader):
        with reader.context("map"):
            reader.skipBlankLines()
            reader.skipSpaces()

            references  = ArchiveReferenceBlock.start(reader)
            discarded   = DiscardedSectionBlock.start(reader)
            memory      = MemoryConfigurationBlock.start(reader)

            cls.marker(reader)

            files = LoadedFileRecord.many(reader)
            reader.skipBlankLines()

            sections = Section.many(reader)

            # Read the (unhandled) remains of the file
            tail = reader.span(reader.pos, len(reader.text))
            reader.pos = tail.end

        return Document(references, discarded, memory, files, sections, tail)

    @classmethod
    def marker(cls, reader):
        with reader.context("memory map"):
            reader.expectTag(cls.MARKER)
            reader.skipBlankLines()
