"""
Ginger Suite - Transform Layer Tests

Covers the zlib (ZICB) and XOR (NECB) layers of wrapped files, and the
positional layouts they are read with.
"""

import sys
from pathlib import Path

import pytest
from hypothesis import given, strategies as st

# Path setup
TESTS_DIR = Path(__file__).parent
SUITE_DIR = TESTS_DIR.parent.parent
sys.path.insert(0, str(SUITE_DIR / "src"))
sys.path.insert(0, str(TESTS_DIR))

from gingersuite.formats.cgr import (  # noqa: E402
    Tag, encode_tags, decode_tags, compress, decompress, xor_mask, unwrap,
    InvalidFileType, DecompressionError, UnprotectError, StructuralParseError,
)
from gingersuite.formats.cgr.steps import Step, skip, run_steps  # noqa: E402
from gingersuite.formats.cgr.transform import is_protected, unprotect  # noqa: E402
from cgr_fixtures import u32, raw_tag, logical_stream, wrap  # noqa: E402


def outer(*tags):
    """Outer stream after the entry tag."""
    return encode_tags(list(tags))


# ═══════════════════════════════════════════════════════════════════════════
# PRIMITIVES
# ═══════════════════════════════════════════════════════════════════════════

def test_xor_mask_flips_bit_two():
    assert xor_mask(b"\x00\x04\xff") == b"\x04\x00\xfb"


def test_xor_mask_twice_is_identity():
    data = bytes(range(256)) * 2
    assert xor_mask(xor_mask(data)) == data


def test_xor_mask_custom_key():
    assert xor_mask(b"\x0f", key=0xff) == b"\xf0"


def test_decompress_inverts_compress():
    data = logical_stream()
    assert decompress(compress(data)) == data
    assert decompress(compress(b"")) == b""


def test_decompress_rejects_garbage():
    with pytest.raises(DecompressionError):
        decompress(b"not zlib at all")


def test_decompress_rejects_cut_stream():
    packed = compress(b"x" * 1000)
    with pytest.raises(DecompressionError):
        decompress(packed[:-4])


# ═══════════════════════════════════════════════════════════════════════════
# LAYOUTS
# ═══════════════════════════════════════════════════════════════════════════

def test_run_steps_captures_by_field():
    tags = [Tag("AAAA", b"1"), Tag("BBBB", b"2"), Tag("CCCC", b"3")]
    captured = run_steps(tags, skip(1) + (Step("BBBB", "b"), Step(None, "c")), "test")
    assert captured == {"b": Tag("BBBB", b"2"), "c": Tag("CCCC", b"3")}


def test_run_steps_name_mismatch():
    with pytest.raises(InvalidFileType) as exc:
        run_steps([Tag("WXYZ")], (Step("ABCD"),), "test")
    assert exc.value.tag == "WXYZ"


def test_run_steps_runs_out_of_tags():
    with pytest.raises(StructuralParseError):
        run_steps([Tag("AAAA")], skip(2), "test")


def test_run_steps_pulls_only_what_it_needs():
    def tags():
        yield Tag("AAAA")
        raise AssertionError("read past the layout")

    assert run_steps(tags(), skip(1), "test") == {}


def test_step_describe():
    assert Step("ZICB", "compressed").describe() == "ZICB -> compressed"
    assert Step().describe() == "<any> (skip)"


# ═══════════════════════════════════════════════════════════════════════════
# UNWRAP
# ═══════════════════════════════════════════════════════════════════════════

def test_unwrap_compressed_only():
    logical = logical_stream()
    result = unwrap(wrap(logical), offset=4)
    assert result.compressed
    assert not result.obfuscated
    assert result.tags == decode_tags(logical)
    assert result.decompressed_size == len(logical)


def test_unwrap_compressed_and_protected():
    logical = logical_stream()
    result = unwrap(wrap(logical, obfuscate=True), offset=4)
    assert result.compressed
    assert result.obfuscated
    assert result.tags == decode_tags(logical)
    assert result.protected_size == len(logical)


def test_unwrap_requires_zicb_third():
    data = outer(Tag("HEAD", u32(1)), Tag("LENS", u32(1)), Tag("ZZZZ", b"x"))
    with pytest.raises(InvalidFileType) as exc:
        unwrap(data)
    assert exc.value.tag == "ZZZZ"


def test_unwrap_short_outer_stream():
    with pytest.raises(StructuralParseError):
        unwrap(outer(Tag("HEAD", u32(1))))


def test_unwrap_ignores_tags_after_zicb():
    data = outer(Tag("HEAD", u32(1)), Tag("LENS", u32(1)),
                 Tag("ZICB", compress(logical_stream()))) + b"TR"
    assert unwrap(data).tags == decode_tags(logical_stream())


def test_unwrap_bad_zlib():
    data = outer(Tag("HEAD", u32(1)), Tag("LENS", u32(1)), Tag("ZICB", b"garbage"))
    with pytest.raises(DecompressionError):
        unwrap(data)


def test_short_decompressed_stream_is_not_protected():
    inner = encode_tags([Tag("ONLY", u32(1)), Tag("TWOS", u32(2))])
    data = outer(Tag("HEAD", u32(1)), Tag("LENS", u32(1)), Tag("ZICB", compress(inner)))
    result = unwrap(data)
    assert not result.obfuscated
    assert [t.name for t in result.tags] == ["ONLY", "TWOS"]


def test_empty_protected_payload():
    inner = encode_tags([
        Tag("VERS", u32(1)), Tag("SIZE", u32(0)), Tag("FLAG", u32(0)), Tag("CRCS", u32(0)),
    ]) + raw_tag(b"NECB", b"")
    data = outer(Tag("HEAD", u32(1)), Tag("LENS", u32(1)), Tag("ZICB", compress(inner)))
    with pytest.raises(UnprotectError):
        unwrap(data)


def test_is_protected_checks_fifth_tag():
    prefix = [Tag("AAAA"), Tag("BBBB"), Tag("CCCC"), Tag("DDDD")]
    assert is_protected(prefix + [Tag("NECB", b"\x00")])
    assert not is_protected(prefix + [Tag("ZICB", b"\x00")])
    assert not is_protected(prefix)


def test_unprotect_returns_unmasked_payload():
    prefix = [Tag("AAAA"), Tag("BBBB"), Tag("CCCC"), Tag("DDDD")]
    assert unprotect(prefix + [Tag("NECB", b"\x04\x05")]) == b"\x00\x01"


# ═══════════════════════════════════════════════════════════════════════════
# PROPERTIES
# ═══════════════════════════════════════════════════════════════════════════

@given(data=st.binary(max_size=4096), level=st.integers(min_value=0, max_value=9))
@pytest.mark.property
def test_decompress_inverts_compress_for_any_bytes(data, level):
    assert decompress(compress(data, level)) == data


@given(data=st.binary(max_size=1024), key=st.integers(min_value=0, max_value=255))
@pytest.mark.property
def test_xor_mask_is_its_own_inverse(data, key):
    masked = xor_mask(data, key)
    assert len(masked) == len(data)
    assert xor_mask(masked, key) == data


@given(payload=st.binary(min_size=1, max_size=256))
@pytest.mark.property
def test_protected_layer_recovers_any_payload(payload):
    prefix = [Tag("AAAA"), Tag("BBBB"), Tag("CCCC"), Tag("DDDD")]
    assert unprotect(prefix + [Tag("NECB", xor_mask(payload))]) == payload
