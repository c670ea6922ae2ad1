"""Project-wide exception types."""

class HostSelectorError(Exception):
    """Base exception for all selector errors."""


class ConfigError(HostSelectorError):
    """Raised when configuration is missing or malformed."""


class ConfigValidationError(ConfigError):
    """Raised when validation fails for supplied configuration."""


class CandidateStateError(HostSelectorError):
    """Raised when a candidate's latency is recorded more than once in a run."""


class SelectionError(HostSelectorError):
    """Raised when the worker pool fails while probing a batch."""


class SelectorClosedError(SelectionError):
    """Raised when a released selector is asked to run again."""
