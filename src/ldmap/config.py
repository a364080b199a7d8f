#!/usr/bin/env python3
# -*- coding: utf-8 -*-


# Built-in
import os


# Local
from .common import DEFAULT_INDENT
from .common import DEFAULT_LOG_LEVEL
from .common import DEFAULT_OUTPUT_FORMAT
from .common import DEFAULT_TAIL_PREVIEW
from .common import LOG_LEVELS
from .common import NormalizePath
from .common import OUTPUT_FORMATS


# External
import yaml


class Config:
    def __init__(self):
        self.path = None

        self.logLevel = DEFAULT_LOG_LEVEL
        self.format = DEFAULT_OUTPUT_FORMAT
        self.showTail = False
        self.tailPreview = DEFAULT_TAIL_PREVIEW
        self.indent = DEFAULT_INDENT

    @staticmethod
    def readChoice(obj, key, field_name, choices, default, normalize=None, error=print):
        if key not in obj:
            return default

        s = obj[key]
        if not isinstance(s, str) or not s:
            error("%s is invalid" % field_name)
            return None

        if normalize is not None:
            s = normalize(s)

        if s not in choices:
            error("%s must be one of %s, received: %r" % (field_name, ", ".join(choices), obj[key]))
            return None

        return s

    @staticmethod
    def readBool(obj, key, field_name, default, error=print):
        if key not in obj:
            return default

        v = obj[key]
        if not isinstance(v, bool):
            error("Expected %s to be a boolean" % field_name)
            return None

        return v

    @staticmethod
    def readInt(obj, key, field_name, default, minimum, error=print):
        if key not in obj:
            return default

        v = obj[key]

        # bool is an int subclass
        if isinstance(v, bool) or not isinstance(v, int) or v < minimum:
            error("In %s, expected an integer >= %d, received: %r" % (field_name, minimum, v))
            return None

        return v

    @staticmethod
    def fromYaml(file_path, error=print):
        ### File Loading ###

        if not os.path.isfile(file_path):
            error("File does not exist: %r" % file_path)
            return None

        with open(file_path, encoding="utf8") as inf:
            try:
                obj = yaml.safe_load(inf)

            except yaml.YAMLError as e:
                error("Could not read YAML file: %r\n"
                      "%s" % (file_path, e))
                return None

        # Empty file
        if obj is None:
            obj = {}

        if not isinstance(obj, dict):
            error("Unexpected file format for file: %r" % file_path)
            return None

        return Config.fromObj(obj, NormalizePath(file_path), error)

    @staticmethod
    def fromObj(obj, path=None, error=print):
        ### Selected Options Sanity Check ###

        available_options = (
            "LogLevel",
            "Format",
            "ShowTail",
            "TailPreview",
            "Indent"
        )

        for k in obj:
            if k not in available_options:
                error("Unrecognized option: %r" % k)
                return None

        ### Config Initialization ###

        config = Config()
        config.path = path

        ### Log Level Reading ###

        log_level = Config.readChoice(obj, "LogLevel", "Log Level", LOG_LEVELS, config.logLevel, str.upper, error)
        if log_level is None:
            return None

        config.logLevel = log_level

        ### Output Format Reading ###

        output_format = Config.readChoice(obj, "Format", "Output Format", OUTPUT_FORMATS, config.format, str.lower, error)
        if output_format is None:
            return None

        config.format = output_format

        ### Tail Options Reading ###

        show_tail = Config.readBool(obj, "ShowTail", "\"ShowTail\"", config.showTail, error)
        if show_tail is None:
            return None

        config.showTail = show_tail

        tail_preview = Config.readInt(obj, "TailPreview", "\"TailPreview\"", config.tailPreview, 1, error)
        if tail_preview is None:
            return None

        config.tailPreview = tail_preview

        ### Dump Indentation Reading ###

        indent = Config.readInt(obj, "Indent", "\"Indent\"", config.indent, 0, error)
        if indent is None:
            return None

        config.indent = indent

        ### Success ###

        return config
