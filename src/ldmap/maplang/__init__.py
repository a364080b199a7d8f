#!/usr/bin/env python3
# -*- coding: utf-8 -*-


# Common:
#
# hex_literal       '0x' { HEX_DIGIT }+                 (at most 64 bits)
#
# path              { CHAR - (' ' | CR | LF) }+
#
# spaces            { ' ' | TAB }+
#
# eol               LF | CR LF | EOF


# Map file:
#
# start             [ spaces ] references discarded memory marker
#                   { load eol }* { section }* tail
#
# references        'Archive member included to satisfy reference by file (symbol)' eol
#                   { reference eol }*
#
# reference         archive '(' member ')' eol spaces path [ spaces ] '(' symbol ')'
#
# discarded         'Discarded input sections' eol { discarded_item eol }*
#
# discarded_item    [ spaces ] path (spaces | eol spaces) hex_literal spaces hex_literal ' ' rest_of_line
#
# memory            'Memory Configuration' eol
#                   'Name' spaces 'Origin' spaces 'Length' spaces 'Attributes' eol
#                   { region eol }*
#
# region            path spaces hex_literal spaces hex_literal [ spaces rest_of_line ]
#
# marker            'Linker script and memory map' eol
#
# load              'LOAD' spaces path
#
# (blank lines are allowed after every tag line and block)


# Sections:
#
# section           [ label ] [ header ] { symbol }*          (consumes at least one line)
#
# label             [ spaces ] path eol
#
# header            [ spaces ] [ path spaces ] hex_literal spaces hex_literal
#                   [ spaces ( load_address | rest_of_line ) ] eol
#
# load_address      'load address' spaces hex_literal [ spaces ]
#
# symbol            [ spaces ] hex_literal spaces
#                   ( hex_literal [ spaces rest_of_line ] | rest_of_line ) eol
#                   [ spaces hex_literal spaces path eol ]    (name, only if both addresses match)


from . import errors
from . import objects
from . import parser
from . import reader
from . import records
from . import sections
from . import token


__all__ = [
    "errors",
    "objects",
    "parser",
    "reader",
    "records",
    "sections",
    "token"
]
