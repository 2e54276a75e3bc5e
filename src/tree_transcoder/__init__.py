"""Transcode legacy-encoded text trees (GBK family) into UTF-8."""

from __future__ import annotations

__version__ = "0.1.0"


def transcode_bytes(data: bytes, encoding: str = "GBK") -> bytes:
    """Transcode an in-memory buffer to UTF-8.

    Parameters
    ----------
    data : bytes
        Raw bytes in ``encoding``.
    encoding : str, default="GBK"
        Registered encoding name (case-sensitive).

    Returns
    -------
    bytes
        UTF-8 encoded text.

    Raises
    ------
    ConfigurationError
        If ``encoding`` is not registered.
    DecodeError
        If ``data`` is invalid under ``encoding``.
    """
    from .decoders.registry import create_default_registry
    from .transform import transcode_bytes as _impl

    return _impl(data, create_default_registry().get(encoding))


__all__ = ["__version__", "transcode_bytes"]
