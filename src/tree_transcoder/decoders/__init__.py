"""Decoder interfaces and registry for source encodings."""

from .base import Decoder
from .registry import DecoderRegistry, create_default_registry

__all__ = ["Decoder", "DecoderRegistry", "create_default_registry"]
