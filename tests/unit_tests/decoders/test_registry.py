"""Unit tests for decoder registry lookup and built-in decoders."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from tree_transcoder.decoders.base import Decoder
from tree_transcoder.decoders.builtins import CodecDecoder
from tree_transcoder.decoders.registry import DecoderRegistry, create_default_registry
from tree_transcoder.errors import ConfigurationError, DecodeError


@dataclass(frozen=True)
class _Decoder:
    name: str

    def decode(self, data: bytes) -> str:
        return data.decode("ascii")


def test_default_registry_exposes_builtins() -> None:
    """Default registry carries the legacy, extended and identity encodings."""
    registry = create_default_registry()
    assert registry.names() == ["GB18030", "GBK", "UTF8"]


def test_lookup_is_case_sensitive() -> None:
    """Only the literal registered spelling resolves."""
    registry = create_default_registry()
    assert registry.get("GBK").name == "GBK"
    assert "gbk" not in registry
    with pytest.raises(ConfigurationError, match="Unknown encoding 'gbk'"):
        registry.get("gbk")


def test_unknown_encoding_lists_available_names() -> None:
    """Unknown names produce a message naming the alternatives."""
    with pytest.raises(ConfigurationError, match="GB18030, GBK, UTF8"):
        create_default_registry().get("LATIN1")


def test_register_requires_non_empty_name() -> None:
    """Reject decoders without a non-empty name."""
    registry = DecoderRegistry()
    with pytest.raises(ConfigurationError, match="non-empty 'name'"):
        registry.register(_Decoder(name="  "))


def test_extra_decoders_are_registered_after_builtins() -> None:
    """Extra decoders extend, and may override, the built-ins."""
    custom = _Decoder(name="ASCII")
    registry = create_default_registry(extra_decoders=[custom])
    assert registry.get("ASCII") is custom
    assert "GBK" in registry


def test_codec_decoder_satisfies_protocol() -> None:
    """Built-in decoders implement the runtime-checkable protocol."""
    assert isinstance(CodecDecoder(name="GBK", codec="gbk"), Decoder)


def test_codec_decoder_rejects_unknown_codec() -> None:
    """Binding a decoder to a codec Python lacks is a configuration error."""
    with pytest.raises(ConfigurationError, match="not available"):
        CodecDecoder(name="X", codec="no-such-codec")


def test_codec_decoder_reports_offsets() -> None:
    """Decode failures carry the registry name and failing byte range."""
    decoder = CodecDecoder(name="GBK", codec="gbk")
    with pytest.raises(DecodeError) as info:
        decoder.decode(b"ok\xff")
    assert info.value.encoding == "GBK"
    assert info.value.start == 2
    assert isinstance(info.value.__cause__, UnicodeDecodeError)
