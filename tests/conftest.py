"""
Shared map texts for the ldmap tests.
"""
import pytest


SAMPLE_MAP = """\
Archive member included to satisfy reference by file (symbol)

/usr/lib/arm-none-eabi/libc.a(lib_a-memcpy.o)
                              build/main.o (memcpy)
/usr/lib/arm-none-eabi/libc.a(lib_a-memset.o)
                              build/init.o (memset)

Discarded input sections

 .text          0x0000000000000000        0x0 build/main.o
 .data          0x0000000000000000        0x0 build/main.o
 .text.unused_helper_function
                0x0000000000000000       0x1c build/util.o

Memory Configuration

Name             Origin             Length             Attributes
FLASH            0x0000000008000000 0x0000000000100000 xr
SRAM             0x0000000020000000 0x0000000000030000 xrw
*default*        0x0000000000000000 0xffffffffffffffff

Linker script and memory map

LOAD build/startup.o
LOAD build/main.o
LOAD /usr/lib/arm-none-eabi/libc.a
                0x0000000020030000                _estack = (ORIGIN (SRAM) + LENGTH (SRAM))

.isr_vector     0x0000000008000000      0x188
                0x0000000008000000                . = ALIGN (0x4)
 *(.isr_vector)
 .isr_vector    0x0000000008000000      0x188 build/startup.o
                0x0000000008000000                g_pfnVectors
                0x0000000008000188                . = ALIGN (0x4)

.text           0x0000000008000188       0x8c
 *(.text)
 .text          0x0000000008000188       0x5c build/main.o
                0x0000000008000188                main
 *(.text*)
 .text.memcpy   0x00000000080001e4       0x10 /usr/lib/arm-none-eabi/libc.a(lib_a-memcpy.o)
                0x00000000080001e4                memcpy
 .text.long_function_name_in_util
                0x00000000080001f4       0x1c build/util.o
                0x00000000080001f4                long_function_name_in_util
 *fill*         0x0000000008000210        0x4

OUTPUT(build/firmware.elf elf32-littlearm)
LOAD linker stubs
"""

SAMPLE_TAIL = """\
OUTPUT(build/firmware.elf elf32-littlearm)
LOAD linker stubs
"""

MINIMAL_MAP = """\
Archive member included to satisfy reference by file (symbol)

a.a(m.o)
  b.o (sym)

Discarded input sections

.g 0x1 0xc b.o

Memory Configuration

Name Origin Length Attributes
FLASH 0x08040000 0x000c0000 xr
*default* 0x0 0xffffffffffffffff

Linker script and memory map

LOAD x.o
0x20030000 base = (ORIGIN(SRAM))
"""

EMPTY_BLOCKS_MAP = """\
Archive member included to satisfy reference by file (symbol)

Discarded input sections

Memory Configuration

Name             Origin             Length             Attributes

Linker script and memory map
"""


@pytest.fixture
def sample_map():
    return SAMPLE_MAP


@pytest.fixture
def minimal_map():
    return MINIMAL_MAP


@pytest.fixture
def empty_blocks_map():
    return EMPTY_BLOCKS_MAP


@pytest.fixture
def sample_map_path(tmp_path):
    path = tmp_path / "firmware.map"
    path.write_text(SAMPLE_MAP, encoding="utf-8")
    return path
