import pytest

from ldmap.maplang.errors import EmptyToken
from ldmap.maplang.errors import GrammarMismatch
from ldmap.maplang.errors import MalformedNumber
from ldmap.maplang.errors import MapParseError
from ldmap.maplang.errors import MissingSection
from ldmap.maplang.reader import MapReader


def test_default_rule_is_map():
    assert MapReader("x").rule == "map"


def test_context_names_innermost_rule():
    reader = MapReader("zz")

    with reader.context("memory configuration"):
        with reader.context("memory region"):
            with pytest.raises(MalformedNumber) as excinfo:
                reader.expectHex()

        assert reader.rule == "memory configuration"

    assert excinfo.value.rule == "memory region"
    assert reader.rule == "map"


def test_attempt_rewinds_on_failure():
    reader = MapReader("0x10 zz")

    def rule(r):
        with r.context("symbol"):
            r.expectHex()
            r.expectSpaces()
            return r.expectHex()

    assert reader.attempt(rule) == (False, None)
    assert reader.pos == 0
    assert reader.rules == []


def test_attempt_commits_on_success():
    reader = MapReader("0x10 0x20")

    def rule(r):
        first = r.expectHex()
        r.expectSpaces()
        return first, r.expectHex()

    assert reader.attempt(rule) == (True, (0x10, 0x20))
    assert reader.isAtEnd()


def test_save_and_restore_cursor():
    reader = MapReader("LOAD a.o")
    memo = reader.saveCursor()
    reader.expectWord("LOAD")
    reader.restoreCursor(memo)
    assert reader.pos == 0
    assert reader.remaining() == "LOAD a.o"


class TestHex:
    def test_value(self):
        reader = MapReader("0x0000000008000000 rest")
        assert reader.expectHex() == 0x08000000
        assert reader.remaining() == " rest"

    def test_u64_max(self):
        assert MapReader("0xffffffffffffffff").expectHex() == 0xFFFFFFFFFFFFFFFF

    def test_missing_prefix(self):
        with pytest.raises(MalformedNumber) as excinfo:
            MapReader("1234").expectHex()

        assert excinfo.value.digits is None
        assert excinfo.value.pos == 0

    def test_empty_digits(self):
        with pytest.raises(MalformedNumber) as excinfo:
            MapReader("0x rest").expectHex()

        assert excinfo.value.digits == ""

    def test_out_of_range(self):
        reader = MapReader("0x10000000000000000")
        with pytest.raises(MalformedNumber) as excinfo:
            reader.expectHex()

        assert excinfo.value.digits == "10000000000000000"
        assert reader.pos == 0

    def test_no_sign_or_decimal(self):
        for text in ("-0x10", "16", "+0x1"):
            with pytest.raises(MalformedNumber):
                MapReader(text).expectHex()


class TestTokens:
    def test_path_is_longest_non_space_run(self):
        reader = MapReader("/usr/lib/libc.a(lib_a-memcpy.o) x")
        assert reader.expectPath() == "/usr/lib/libc.a(lib_a-memcpy.o)"
        assert reader.remaining() == " x"

    def test_empty_path(self):
        with pytest.raises(EmptyToken) as excinfo:
            MapReader(" a.o").expectPath("object path")

        assert excinfo.value.what == "object path"
        assert "object path" in str(excinfo.value)

    def test_name_rejects_hex(self):
        with pytest.raises(GrammarMismatch):
            MapReader("0x10").expectName()

    def test_until(self):
        reader = MapReader("libc.a(m.o)")
        assert reader.expectUntil('(') == "libc.a"
        assert reader.remaining() == "(m.o)"

    def test_until_empty(self):
        with pytest.raises(EmptyToken):
            MapReader("(m.o)").expectUntil('(')

    def test_until_not_on_line(self):
        with pytest.raises(GrammarMismatch):
            MapReader("libc.a\n(m.o)").expectUntil('(')

    def test_rest_of_line_without_line_ending(self):
        reader = MapReader("build/my file.o\r\nnext")
        assert reader.restOfLine() == "build/my file.o"
        assert reader.remaining() == "\r\nnext"


class TestTag:
    def test_consumes_line(self):
        reader = MapReader("Memory Configuration\r\nName")
        reader.expectTag("Memory Configuration")
        assert reader.remaining() == "Name"

    def test_at_end_of_input(self):
        reader = MapReader("Linker script and memory map")
        reader.expectTag("Linker script and memory map")
        assert reader.isAtEnd()

    def test_case_sensitive(self):
        with pytest.raises(MissingSection) as excinfo:
            MapReader("memory configuration\n").expectTag("Memory Configuration")

        assert excinfo.value.tag == "Memory Configuration"

    def test_trailing_content(self):
        reader = MapReader("Memory Configuration extra\n")
        with pytest.raises(MissingSection):
            reader.expectTag("Memory Configuration")

        assert reader.pos == 0


class TestWhitespace:
    def test_skip_blank_lines(self):
        reader = MapReader("\n   \n\t\r\nLOAD")
        assert reader.skipBlankLines() == 3
        assert reader.remaining() == "LOAD"

    def test_skip_blank_lines_keeps_indentation_of_content(self):
        reader = MapReader("\n  0x10")
        assert reader.skipBlankLines() == 1
        assert reader.remaining() == "  0x10"

    def test_skip_trailing_spaces_at_end(self):
        reader = MapReader("\n  ")
        reader.skipBlankLines()
        assert reader.isAtEnd()

    def test_expect_spaces(self):
        reader = MapReader("\t x")
        assert reader.expectSpaces() == 5

        with pytest.raises(GrammarMismatch):
            reader.expectSpaces()

    def test_wrapped_spaces(self):
        reader = MapReader("\n                0x0")
        assert reader.expectWrappedSpaces() == 16
        assert reader.remaining() == "0x0"

    def test_wrapped_spaces_needs_indentation(self):
        with pytest.raises(GrammarMismatch):
            MapReader("\n0x0").expectWrappedSpaces()

    def test_line_end_accepts_end_of_input(self):
        reader = MapReader("")
        reader.expectLineEnd()

        with pytest.raises(GrammarMismatch):
            reader.expectLineEnding()


def test_error_snapshot():
    src = "Name Origin\nFLASH zz"
    reader = MapReader(src)
    reader.pos = src.index("zz")

    e = reader.malformedNumber()
    assert isinstance(e, MapParseError)
    assert e.coordinates == (2, 7)
    assert e.line == 2
    assert e.column == 7
    assert e.remaining == "zz"
    assert str(e) == "At line 2, column 7 (map): expected hexadecimal literal"


def test_line_at_and_coordinates():
    src = "LOAD a.o\r\nLOAD b.o\n"
    reader = MapReader(src)

    assert reader.lineAt(src.index("b.o")) == "LOAD b.o"
    assert reader.lineAt(0) == "LOAD a.o"
    assert MapReader.indexToCoordinates(src, src.index("b.o")) == (2, 6)
