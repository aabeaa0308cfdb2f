"""Route generation configuration.

TrellisConfig is a frozen dataclass, immutable after creation.
"""

from dataclasses import dataclass
from pathlib import Path

from trellis.errors import ConfigurationError

_LOG_LEVELS = frozenset({"debug", "info", "warning", "error", "critical"})


@dataclass(frozen=True, slots=True)
class TrellisConfig:
    """Route generation configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = TrellisConfig(pages_dirs=("app/pages",), extract_meta=True)
    """

    # Scanning
    pages_dirs: tuple[str | Path, ...] = ("pages",)
    extensions: tuple[str, ...] = (".vue",)

    # Page metadata
    extract_meta: bool = False  # Statically read definePageMeta() from page scripts
    meta_function: str = "definePageMeta"
    meta_cache_size: int | None = None  # None = unbounded

    # Serialization
    override_meta: bool = True  # Static route values win over runtime page meta

    # Logging
    log_level: str = "warning"

    def validate(self) -> None:
        """Raise ``ConfigurationError`` if any field is out of range."""
        if not self.extensions:
            msg = "At least one page extension is required."
            raise ConfigurationError(msg)
        for ext in self.extensions:
            if not ext.startswith(".") or len(ext) < 2:
                msg = f"Page extension {ext!r} must start with '.', e.g. '.vue'."
                raise ConfigurationError(msg)
        if not self.meta_function.isidentifier():
            msg = f"meta_function {self.meta_function!r} is not a valid identifier."
            raise ConfigurationError(msg)
        if self.meta_cache_size is not None and self.meta_cache_size <= 0:
            msg = "meta_cache_size must be a positive integer or None."
            raise ConfigurationError(msg)
        if self.log_level.lower() not in _LOG_LEVELS:
            msg = f"Unknown log level {self.log_level!r}."
            raise ConfigurationError(msg)
