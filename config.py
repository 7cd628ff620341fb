"""Default configuration for textstats."""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from analysis.normalizer import DEFAULT_BASE, validate_base
from analysis.word_frequency import TieBreak, resolve_tie_break
from core.languages import ENGLISH, require_language
from errors import InvalidConfigurationError

# Environment variable prefix for Config.from_env()
ENV_PREFIX = "TEXTSTATS_"


@dataclass
class Config:
    """Pipeline configuration."""

    # Stopwords
    language: str = ENGLISH.code  # stopword list language, or "none"
    extra_stopwords: list[str] = field(default_factory=list)  # character names etc.
    use_default_stopwords: bool = True

    # Statistics
    normalization_base: float = DEFAULT_BASE  # frequency per million by default
    tie_break: str = TieBreak.FIRST_SEEN.value
    top_n: int = 10

    # Processing
    workers: int = 1  # per-document parallelism; 1 = sequential
    debug: bool = False

    def validate(self) -> "Config":
        """
        Check all settings before any computation starts.

        Raises:
            InvalidConfigurationError: On bad base, tie-break, workers or top_n
            UnsupportedLanguageError: On unknown stopword language
        """
        validate_base(self.normalization_base)
        resolve_tie_break(self.tie_break)
        if self.language.lower() != "none":
            require_language(self.language, "Config")
        if not isinstance(self.workers, int) or self.workers < 1:
            raise InvalidConfigurationError("workers", self.workers, "must be >= 1")
        if not isinstance(self.top_n, int) or self.top_n < 1:
            raise InvalidConfigurationError("top_n", self.top_n, "must be >= 1")
        return self

    @classmethod
    def from_env(cls, dotenv_path=None) -> "Config":
        """
        Build config from TEXTSTATS_* environment variables (.env is loaded first).

        Variables: TEXTSTATS_LANGUAGE, TEXTSTATS_EXTRA_STOPWORDS (comma-separated),
        TEXTSTATS_USE_DEFAULT_STOPWORDS, TEXTSTATS_BASE, TEXTSTATS_TIE_BREAK,
        TEXTSTATS_TOP_N, TEXTSTATS_WORKERS, TEXTSTATS_DEBUG
        """
        load_dotenv(dotenv_path)
        config = cls()

        def env(name: str):
            return os.environ.get(ENV_PREFIX + name)

        if env("LANGUAGE"):
            config.language = env("LANGUAGE")
        if env("EXTRA_STOPWORDS"):
            config.extra_stopwords = [w.strip() for w in env("EXTRA_STOPWORDS").split(",") if w.strip()]
        if env("USE_DEFAULT_STOPWORDS"):
            config.use_default_stopwords = _parse_bool("USE_DEFAULT_STOPWORDS", env("USE_DEFAULT_STOPWORDS"))
        if env("BASE"):
            config.normalization_base = _parse_number("BASE", env("BASE"), float)
        if env("TIE_BREAK"):
            config.tie_break = env("TIE_BREAK")
        if env("TOP_N"):
            config.top_n = _parse_number("TOP_N", env("TOP_N"), int)
        if env("WORKERS"):
            config.workers = _parse_number("WORKERS", env("WORKERS"), int)
        if env("DEBUG"):
            config.debug = _parse_bool("DEBUG", env("DEBUG"))

        return config.validate()


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    raise InvalidConfigurationError(ENV_PREFIX + name, value, "expected true/false")


def _parse_number(name: str, value: str, kind):
    try:
        return kind(value)
    except ValueError:
        raise InvalidConfigurationError(ENV_PREFIX + name, value, f"expected {kind.__name__}") from None
