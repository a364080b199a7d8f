#!/usr/bin/env python3
# -*- coding: utf-8 -*-


# Built-in
import argparse
import json
import logging
import sys


# Local
from ldmap import Config
from ldmap import MapFile
from ldmap import MapParseError
from ldmap import TOOL_VERSION
from ldmap.common import LOG_LEVELS
from ldmap.common import NormalizePath
from ldmap.common import OUTPUT_FORMATS
from ldmap.common import Preview


# External
import yaml


def formatSummary(mapfile, config):
    info = mapfile.info()

    lines = [
        "Archive references:  %d" % info.numMembers,
        "Discarded sections:  %d" % info.numDiscarded,
        "Memory regions:      %d" % info.numMemories,
        "Loaded files:        %d" % info.numFiles,
        "Section nodes:       %d" % info.numSections,
        "Unparsed tail:       %d characters" % info.tailLength
    ]

    if info.numMemories:
        lines.append('')
        lines.append("%-16s %-18s %-18s %s" % ("Name", "Origin", "Length", "Attributes"))
        for region in mapfile.memory:
            attrs = "-" if region.attrs is None else str(region.attrs)
            lines.append("%-16s 0x%016x 0x%016x %s" % (region.name, region.origin, region.length, attrs))

    if config.showTail and info.tailLength:
        line, col = mapfile.tailCoordinates
        lines.append('')
        lines.append("Unparsed tail (line %d, column %d):" % (line, col))
        lines.append(Preview(mapfile.tail, config.tailPreview))

    return '\n'.join(lines)


def formatDump(mapfile, config):
    obj = mapfile.toDict()
    if not config.showTail:
        del obj["tail"]

    if config.format == "json":
        return json.dumps(obj, indent=config.indent or None)

    return yaml.safe_dump(obj, indent=max(config.indent, 2), sort_keys=False).rstrip('\n')


def intAtLeast(minimum):
    def convert(s):
        try:
            v = int(s)

        except ValueError:
            raise argparse.ArgumentTypeError("expected an integer, received: %r" % s)

        if v < minimum:
            raise argparse.ArgumentTypeError("expected an integer >= %d, received: %d" % (minimum, v))

        return v

    return convert


def makeArgParser():
    parser = argparse.ArgumentParser(
        prog="ldmap",
        description="Parse a GNU ld linker map file into a structured tree"
    )
    parser.add_argument("file", help="map file to parse")
    parser.add_argument("-c", "--config", help="path to a YAML configuration file")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, help="application log level")
    parser.add_argument("-f", "--format", type=str.lower, choices=OUTPUT_FORMATS, help="output format")
    parser.add_argument("--show-tail", action="store_true", default=None, help="show the text left unparsed")
    parser.add_argument("--tail-preview", type=intAtLeast(1), help="number of characters of the unparsed tail to show")
    parser.add_argument("--indent", type=intAtLeast(0), help="indentation of the JSON/YAML dump")
    parser.add_argument("--version", action="version", version="%(prog)s " + TOOL_VERSION)
    return parser


def main(argv=None, out=print):
    parser = makeArgParser()
    args = parser.parse_args(argv)

    def error(*args, **kargs):
        print("While trying to read configuration, encountered the following error:\n", file=sys.stderr)
        print(*args, file=sys.stderr, **kargs)

    ### Configuration ###

    if args.config is not None:
        config = Config.fromYaml(args.config, error)
        if config is None:
            return 2

    else:
        config = Config()

    overrides = {
        "logLevel":     args.log_level,
        "format":       args.format,
        "showTail":     args.show_tail,
        "tailPreview":  args.tail_preview,
        "indent":       args.indent
    }

    for k, v in overrides.items():
        if v is not None:
            setattr(config, k, v)

    ### Logging ###

    logging.basicConfig(level=config.logLevel, format="%(levelname)s: %(message)s")
    logger = logging.getLogger("ldmap")

    ### Parsing ###

    path = NormalizePath(args.file)

    try:
        mapfile = MapFile.fromFile(path)

    except OSError as e:
        logger.error("Could not read map file: %s", e)
        return 2

    except UnicodeDecodeError as e:
        logger.error("Map file is not valid text: %s", e)
        return 2

    except MapParseError as e:
        logger.error("Failed to parse map file: %s", path)
        print(MapFile.formatError(e), file=sys.stderr)
        return 1

    ### Output ###

    if config.format == "summary":
        out(formatSummary(mapfile, config))

    else:
        out(formatDump(mapfile, config))

    return 0


if __name__ == "__main__":
    sys.exit(main())
