from __future__ import annotations


class JDToolsError(Exception):
    """Base exception for all jdtools errors."""


class ISOFormatError(JDToolsError, ValueError):
    """Raised when a string does not match the supported ISO-8601 subset."""
