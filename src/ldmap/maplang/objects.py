#!/usr/bin/env python3
# -*- coding: utf-8 -*-


from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional, Tuple

from .token import TextSpan


def spanToStr(span):
    return None if span is None else str(span)


@dataclass(frozen=True)
class ArchiveReference:
    """Why an archive member was pulled into the link."""

    archive: TextSpan
    object: TextSpan
    symbol: TextSpan

    def toDict(self):
        return {
            "archive": str(self.archive),
            "object": str(self.object),
            "symbol": str(self.symbol)
        }


@dataclass(frozen=True)
class DiscardedSection:
    group: TextSpan
    addr: int
    size: int
    source: TextSpan

    def toDict(self):
        return {
            "group": str(self.group),
            "addr": self.addr,
            "size": self.size,
            "source": str(self.source)
        }


@dataclass(frozen=True)
class MemoryRegion:
    """
    One configured memory bank.

    `attrs` is None when the region has no attribute column at all
    (e.g. `*default*`), which is distinct from an empty attribute column.
    """

    name: TextSpan
    origin: int
    length: int
    attrs: Optional[TextSpan] = None

    def toDict(self):
        return {
            "name": str(self.name),
            "origin": self.origin,
            "length": self.length,
            "attrs": spanToStr(self.attrs)
        }


@dataclass(frozen=True)
class LoadedFile:
    path: TextSpan

    def toDict(self):
        return {
            "path": str(self.path)
        }


class SymbolKindType(IntEnum):
    ExpressionValue     = 0
    ObjectContribution  = 1


@dataclass(frozen=True)
class ExpressionValue:
    """Linker script symbol or alias with its literal right-hand side."""

    text: TextSpan

    @property
    def type(self):
        return SymbolKindType.ExpressionValue

    def toDict(self):
        return {
            "kind": "expression",
            "value": str(self.text)
        }


@dataclass(frozen=True)
class ObjectContribution:
    """Code or data placed from an object file."""

    size: int
    source: Optional[TextSpan] = None

    @property
    def type(self):
        return SymbolKindType.ObjectContribution

    def toDict(self):
        return {
            "kind": "object",
            "size": self.size,
            "source": spanToStr(self.source)
        }


@dataclass(frozen=True)
class SymbolNode:
    addr: int
    kind: object
    name: Optional[TextSpan] = None

    # Diagnostic only, never used to decide nesting
    indent: int = field(default=0, compare=False)

    def toDict(self):
        d = {
            "name": spanToStr(self.name),
            "addr": self.addr
        }
        d.update(self.kind.toDict())
        return d


@dataclass(frozen=True)
class SectionNode:
    """
    Placed section or object contribution.

    `name`, `addr` and `size` are either all set or all None. A node
    without them continues the header context of the node before it.
    `label` is the input section pattern line (e.g. `*(.text*)`) that
    introduced the node, if any. `loadAddr` is the load address printed
    after an output section header placed elsewhere than it runs from,
    in which case there is no `source`.
    """

    name: Optional[TextSpan] = None
    addr: Optional[int] = None
    size: Optional[int] = None
    source: Optional[TextSpan] = None
    symbols: Tuple[SymbolNode, ...] = ()
    label: Optional[TextSpan] = None
    loadAddr: Optional[int] = None

    # Indentation of the node's first line, diagnostic only
    indent: int = field(default=0, compare=False)

    def __post_init__(self):
        if not (self.name is None) == (self.addr is None) == (self.size is None):
            raise ValueError("Section name, address and size must be all set or all None")

        if self.name is None and (self.source is not None or self.loadAddr is not None):
            raise ValueError("Section without a header cannot have a source or a load address")

        if self.source is not None and self.loadAddr is not None:
            raise ValueError("Section cannot have both a source and a load address")

    @property
    def hasHeader(self):
        return self.name is not None

    def toDict(self):
        return {
            "name": spanToStr(self.name),
            "addr": self.addr,
            "size": self.size,
            "source": spanToStr(self.source),
            "loadAddr": self.loadAddr,
            "label": spanToStr(self.label),
            "symbols": [symbol.toDict() for symbol in self.symbols]
        }


@dataclass(frozen=True)
class Document:
    references: Tuple[ArchiveReference, ...]
    discarded: Tuple[DiscardedSection, ...]
    memory: Tuple[MemoryRegion, ...]
    files: Tuple[LoadedFile, ...]
    sections: Tuple[SectionNode, ...]

    # Text following the last recognized node, not modeled
    tail: TextSpan

    @property
    def tailPos(self):
        return self.tail.pos

    def toDict(self):
        return {
            "references": [reference.toDict() for reference in self.references],
            "discarded": [section.toDict() for section in self.discarded],
            "memory": [region.toDict() for region in self.memory],
            "files": [loaded.toDict() for loaded in self.files],
            "sections": [section.toDict() for section in self.sections],
            "tail": str(self.tail)
        }
