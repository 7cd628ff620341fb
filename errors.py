"""Error types raised by the text statistics pipeline.

Empty corpora and empty documents are NOT errors - they produce empty
tables. Only bad configuration and broken injected capabilities raise.
"""


class TextStatsError(Exception):
    """Base class for all textstats errors."""


class InvalidConfigurationError(TextStatsError, ValueError):
    """Raised before any computation when a setting is unusable.

    Examples: normalization base <= 0, unknown tie-break mode,
    duplicate document ids, missing TSV columns.
    """

    def __init__(self, setting: str, value, reason: str = ""):
        self.setting = setting
        self.value = value
        self.reason = reason
        message = f"Invalid {setting}: {value!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class ScorerError(TextStatsError):
    """Raised when an injected sentence scorer breaks its contract."""
