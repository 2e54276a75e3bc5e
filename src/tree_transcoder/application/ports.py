"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from typing import Protocol

from tree_transcoder.decoders.base import Decoder


class DecoderLookup(Protocol):
    """Resolve an encoding name into a decoder."""

    def get(self, name: str) -> Decoder:
        """Return decoder or raise ``ConfigurationError``."""
