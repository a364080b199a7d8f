#!/usr/bin/env python3
# -*- coding: utf-8 -*-


from .common import TOOL_VERSION

from .config import Config
from .mapfile import MapFile, MapInfo, OutputSection
from .maplang.errors import EmptyToken, GrammarMismatch, MalformedNumber, MapParseError, MissingSection
from .maplang.objects import ArchiveReference, DiscardedSection, LoadedFile, MemoryRegion
from .maplang.objects import Document, ExpressionValue, ObjectContribution, SectionNode, SymbolKindType, SymbolNode
from .maplang.token import TextSpan


__all__ = [
    "TOOL_VERSION",
    "Config",
    "MapFile", "MapInfo", "OutputSection",
    "MapParseError", "MalformedNumber", "EmptyToken", "MissingSection", "GrammarMismatch",
    "ArchiveReference", "DiscardedSection", "LoadedFile", "MemoryRegion",
    "Document", "ExpressionValue", "ObjectContribution", "SectionNode", "SymbolKindType", "SymbolNode",
    "TextSpan"
]
