"""Built-in decoders backed by Python's codec registry."""

from __future__ import annotations

import codecs
from dataclasses import dataclass

from tree_transcoder.errors import ConfigurationError, DecodeError

GBK = "GBK"
GB18030 = "GB18030"
UTF8 = "UTF8"

DEFAULT_ENCODING = GBK


@dataclass(frozen=True)
class CodecDecoder:
    """Strict decoder bound to a named Python codec.

    Parameters
    ----------
    name : str
        Registry name, matched case-sensitively.
    codec : str
        Python codec name passed to :func:`codecs.lookup`.
    """

    name: str
    codec: str

    def __post_init__(self) -> None:
        try:
            codecs.lookup(self.codec)
        except LookupError as exc:
            raise ConfigurationError(
                f"Codec '{self.codec}' for encoding '{self.name}' is not available."
            ) from exc

    def decode(self, data: bytes) -> str:
        """Decode ``data``, raising ``DecodeError`` on any invalid sequence."""
        try:
            return data.decode(self.codec, errors="strict")
        except UnicodeDecodeError as exc:
            raise DecodeError(self.name, exc.start, exc.end, exc.reason) from exc


def builtin_decoders() -> tuple[CodecDecoder, ...]:
    """Return the decoders every default registry carries."""
    return (
        CodecDecoder(name=GBK, codec="gbk"),
        CodecDecoder(name=GB18030, codec="gb18030"),
        CodecDecoder(name=UTF8, codec="utf-8"),
    )
