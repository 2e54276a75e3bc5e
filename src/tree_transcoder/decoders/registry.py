"""Decoder registry keyed by encoding name."""

from __future__ import annotations

from collections.abc import Iterable

from tree_transcoder.decoders.base import Decoder
from tree_transcoder.decoders.builtins import builtin_decoders
from tree_transcoder.errors import ConfigurationError


class DecoderRegistry:
    """Registry mapping encoding names to decoders.

    Lookups are literal and case-sensitive: ``"GBK"`` resolves, ``"gbk"``
    does not.
    """

    def __init__(self) -> None:
        self._decoders: dict[str, Decoder] = {}

    def register(self, decoder: Decoder) -> None:
        """Register decoder instance by its name.

        Parameters
        ----------
        decoder : Decoder
            Decoder to register. A later registration with the same name
            replaces the earlier one.

        Raises
        ------
        ConfigurationError
            If decoder does not provide a valid name.
        """
        name = getattr(decoder, "name", "")
        if not isinstance(name, str) or not name.strip():
            raise ConfigurationError("Decoder must define a non-empty 'name'.")
        self._decoders[name] = decoder

    def names(self) -> list[str]:
        """Return registered encoding names, sorted."""
        return sorted(self._decoders.keys())

    def get(self, name: str) -> Decoder:
        """Get decoder by encoding name.

        Parameters
        ----------
        name : str
            Encoding name as given by the user.

        Returns
        -------
        Decoder
            Registered decoder.

        Raises
        ------
        ConfigurationError
            If the encoding name is not registered.
        """
        try:
            return self._decoders[name]
        except KeyError as exc:
            raise ConfigurationError(
                f"Unknown encoding '{name}'. Available encodings: {', '.join(self.names())}"
            ) from exc

    def __contains__(self, name: object) -> bool:
        return name in self._decoders


def create_default_registry(
    extra_decoders: Iterable[Decoder] | None = None,
) -> DecoderRegistry:
    """Create default decoder registry.

    Parameters
    ----------
    extra_decoders : Iterable[Decoder] | None, optional
        Additional decoders registered after the built-ins.

    Returns
    -------
    DecoderRegistry
        Registry with ``GBK``, ``GB18030``, ``UTF8`` and any extras.
    """
    registry = DecoderRegistry()
    for decoder in builtin_decoders():
        registry.register(decoder)
    for decoder in extra_decoders or []:
        registry.register(decoder)
    return registry
