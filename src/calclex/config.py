"""ContextVar-based scan configuration for calclex.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The defaults reproduce the plain scanning and validation rules; the flags
only exist for callers that want a stricter reading of the input.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from calclex.config import ScanConfig, scan_config_context

    with scan_config_context(ScanConfig(reject_empty_expression=True)):
        expression = parse("   ")  # raises InvalidExpressionError

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Read by the Scanner when it is constructed and by the Validator at the
    start of each validate() call.

    Attributes:
        strict_decimal_point: Stop a number at its second '.' instead of
            consuming the whole run and rejecting it ("1.2.3" scans as 1.2
            followed by .3, which the validator then rejects as adjacent
            numbers)
        reject_empty_expression: Raise InvalidExpressionError for input that
            holds only whitespace instead of returning an empty Expression

    """

    strict_decimal_point: bool = False
    reject_empty_expression: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ScanConfig":
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ScanConfig.from_dict({
            ...     "strict_decimal_point": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.strict_decimal_point
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (thread-local)."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context.

    Only affects the current thread's context. Other threads are unaffected.
    """
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to default configuration."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with scan_config_context(ScanConfig(strict_decimal_point=True)):
        ...     tokens = tokenize("1.2.3")
        >>> # Automatically reset to previous config

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
]
