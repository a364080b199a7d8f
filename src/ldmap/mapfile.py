#!/usr/bin/env python3
# -*- coding: utf-8 -*-


# Built-in
from dataclasses import dataclass
import logging
from typing import Optional, Tuple


# Local
from .maplang.objects import SectionNode
from .maplang.parser import MapGrammar
from .maplang.token import indexToCoordinates
from .maplang.token import lineBounds


LOGGER = logging.getLogger("ldmap.mapfile")


@dataclass(frozen=True)
class MapInfo:
    numMembers: int
    numDiscarded: int
    numMemories: int
    numFiles: int
    numSections: int
    tailLength: int


@dataclass(frozen=True)
class OutputSection:
    """
    An output section header node and the nodes placed into it.
    `node` is None for the nodes found before the first output section.
    """

    node: Optional[SectionNode]
    members: Tuple[SectionNode, ...]

    @property
    def name(self):
        return None if self.node is None else self.node.name


class MapFile:
    """
    Parsed linker map.

    Every record borrows its text from `self.text`, which this object keeps
    alive. Use `toDict()` to get plain values that do not reference it.
    """

    def __init__(self, text, document):
        self.text = text
        self.document = document

    @classmethod
    def parse(cls, text):
        document = MapGrammar.parse(text)
        mapfile = cls(text, document)

        info = mapfile.info()
        LOGGER.info("Parsed map (%d refs, %d discarded, %d memories, %d files, %d sections)",
                    info.numMembers, info.numDiscarded, info.numMemories, info.numFiles, info.numSections)

        if info.tailLength:
            line, col = mapfile.tailCoordinates
            LOGGER.warning("Unparsed content from line %d, column %d (%d characters)", line, col, info.tailLength)

        return mapfile

    @classmethod
    def fromFile(cls, path, encoding="utf-8"):
        LOGGER.debug("Loading map file: %r", str(path))

        # Keep line endings as they are, offsets are into the raw text
        with open(path, encoding=encoding, newline='') as inf:
            text = inf.read()

        return cls.parse(text)

    @property
    def references(self):
        return self.document.references

    @property
    def discarded(self):
        return self.document.discarded

    @property
    def memory(self):
        return self.document.memory

    @property
    def files(self):
        return self.document.files

    @property
    def sections(self):
        return self.document.sections

    @property
    def tail(self):
        return str(self.document.tail)

    @property
    def tailPos(self):
        return self.document.tailPos

    @property
    def tailCoordinates(self):
        return indexToCoordinates(self.text, self.tailPos)

    def info(self):
        document = self.document
        return MapInfo(
            numMembers=len(document.references),
            numDiscarded=len(document.discarded),
            numMemories=len(document.memory),
            numFiles=len(document.files),
            numSections=len(document.sections),
            tailLength=len(document.tail)
        )

    def outputSections(self):
        """
        Groups the flat section nodes by output section.

        An unindented node with a header but no source path opens an
        output section, the nodes after it belong to it until the next one.
        The parse tree itself never depends on indentation.
        """

        groups = []
        current = None
        members = []

        for node in self.document.sections:
            if node.hasHeader and node.source is None and node.indent == 0:
                if current is not None or members:
                    groups.append(OutputSection(current, tuple(members)))

                current = node
                members = []

            else:
                members.append(node)

        if current is not None or members:
            groups.append(OutputSection(current, tuple(members)))

        return tuple(groups)

    def reconstruct(self):
        """
        Parsed prefix followed by the unparsed tail. The tail starts where
        the last recognized node ends, so this always equals `self.text`;
        re-parsing it yields an equal document.
        """

        return self.text[:self.tailPos] + self.tail

    def toDict(self):
        return self.document.toDict()

    @staticmethod
    def formatError(e):
        """
        Renders a `MapParseError` with the offending line and a caret under the failing column.
        """

        start, end = lineBounds(e.src, e.pos)
        line_text = e.src[start:end]
        caret_col = max(0, min(e.pos, end) - start)

        return "%s\n    %s\n    %s^" % (e, line_text, ' ' * caret_col)
