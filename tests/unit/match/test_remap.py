"""Unit tests for ExtendedAsciiRemapper."""

import pytest

from fuzzio.match.remap import ExtendedAsciiRemapper, RemapOverflowError


def test_ascii_passthrough():
    remapper = ExtendedAsciiRemapper()

    assert remapper.remap('plain ascii') == 'plain ascii'
    assert len(remapper) == 0


def test_codes_assigned_from_128_in_first_seen_order():
    remapper = ExtendedAsciiRemapper()

    assert remapper.remap('тест') == '\x80\x81\x82\x80'
    assert remapper.mapping == {'т': '\x80', 'е': '\x81', 'с': '\x82'}


def test_table_is_cumulative():
    remapper = ExtendedAsciiRemapper()
    remapper.remap('тест')

    assert remapper.remap('сет') == '\x82\x81\x80'
    assert remapper.remap('тесты') == '\x80\x81\x82\x80\x83'
    assert len(remapper) == 4


def test_mixed_ascii_and_non_ascii():
    remapper = ExtendedAsciiRemapper()

    assert remapper.remap('café 1') == 'caf\x80 1'


def test_one_unit_per_character():
    remapper = ExtendedAsciiRemapper()
    text = 'ёлка 🎄'

    assert len(remapper.remap(text)) == len(text)
    assert len(text.encode('utf-8')) > len(text)


def test_strict_ceiling():
    remapper = ExtendedAsciiRemapper(strict_byte_ceiling=True)
    remapper.remap(''.join(chr(0x4E00 + i) for i in range(128)))

    assert len(remapper) == 128
    # known characters still remap once the table is full
    assert remapper.remap(chr(0x4E00)) == '\x80'
    with pytest.raises(RemapOverflowError, match='all 128 single-byte codes'):
        remapper.remap(chr(0x4E00 + 128))
    assert len(remapper) == 128


def test_wide_mode_is_unbounded():
    remapper = ExtendedAsciiRemapper()
    remapper.remap(''.join(chr(0x4E00 + i) for i in range(200)))

    assert remapper.remap(chr(0x4E00 + 199)) == chr(128 + 199)


def test_snapshot_and_restore():
    remapper = ExtendedAsciiRemapper()
    remapper.remap('ж')
    saved = remapper.snapshot()

    remapper.remap('щ')
    remapper.restore(saved)

    assert len(remapper) == 1
    assert remapper.remap('щж') == '\x81\x80'
