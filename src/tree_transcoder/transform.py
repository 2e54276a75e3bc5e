"""Transform primitive: legacy-encoded bytes to UTF-8 bytes."""

from __future__ import annotations

from tree_transcoder.decoders.base import Decoder


def transcode_bytes(data: bytes, decoder: Decoder) -> bytes:
    """Decode ``data`` with ``decoder`` and re-encode it as UTF-8.

    Parameters
    ----------
    data : bytes
        Raw file contents in the decoder's encoding.
    decoder : Decoder
        Shared, read-only decoding capability.

    Returns
    -------
    bytes
        The complete UTF-8 encoding of the decoded text.

    Raises
    ------
    DecodeError
        If ``data`` is not valid under the decoder's encoding. Nothing is
        returned in that case.
    """
    return decoder.decode(data).encode("utf-8")
