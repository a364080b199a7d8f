#!/usr/bin/env python3
# -*- coding: utf-8 -*-


import os
import pathlib


TOOL_VERSION = "1.0.0"

LOG_LEVELS = (
    "DEBUG",
    "INFO",
    "WARNING",
    "ERROR",
    "CRITICAL"
)

OUTPUT_FORMATS = (
    "summary",
    "json",
    "yaml"
)

DEFAULT_LOG_LEVEL       = "WARNING"
DEFAULT_OUTPUT_FORMAT   = "summary"
DEFAULT_TAIL_PREVIEW    = 200
DEFAULT_INDENT          = 2


def NormalizePath(path):
    return pathlib.Path(os.path.normcase(os.path.normpath(path))).resolve()


def Preview(s, length):
    if len(s) <= length:
        return s

    return s[:length] + "..."
