"""Decoder protocol shared by the registry and the transform primitive."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Decoder(Protocol):
    """Protocol implemented by decoding capabilities.

    Implementations must be immutable once constructed: a single instance is
    shared by every file task of a run.
    """

    name: str

    def decode(self, data: bytes) -> str:
        """Decode ``data`` strictly.

        Parameters
        ----------
        data : bytes
            Raw bytes in this decoder's encoding.

        Returns
        -------
        str
            Decoded text.

        Raises
        ------
        DecodeError
            If ``data`` is malformed or truncated under this encoding.
        """
