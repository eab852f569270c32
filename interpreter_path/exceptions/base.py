"""Base exception classes for the interpreter path service."""


class ConfigError(Exception):
    """Base class for user-facing configuration errors.

    All settings and state related exceptions inherit from this class so the
    CLI can report them uniformly.
    """
