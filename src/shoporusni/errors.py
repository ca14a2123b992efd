"""Error types for shoporusni."""

from __future__ import annotations


class ShoporusniError(RuntimeError):
    """Base error for shoporusni operations."""


class CacheIOError(ShoporusniError):
    """Cache file or config directory could not be created, read or written."""


class FetchError(ShoporusniError):
    """The statistics endpoint could not be reached or answered with an error."""


class ResolutionError(ShoporusniError):
    """No cached copy exists and the fetch failed."""


class InvariantViolation(ShoporusniError):
    """The arbiter saw a cache state that classification never produces."""


class DecodeError(ShoporusniError):
    """Response text does not match the statistics document shape."""


class ConfigError(ShoporusniError):
    """config.toml is malformed."""
