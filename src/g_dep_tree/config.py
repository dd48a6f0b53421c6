"""Report reading configuration.

Configuration is read from environment variables.
"""
from __future__ import annotations

import codecs
import logging
import os
from dataclasses import dataclass


@dataclass
class ReportConfig:
    """Report reading configuration container.

    Attributes:
        encoding: Text encoding of report files, or None for the platform default
        log_level: Logging level name used by the command line
    """

    encoding: str | None = None
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "ReportConfig":
        """Create configuration from environment variables.

        Environment variables:
            GDEP_ENCODING: Report file encoding (default: platform default)
            GDEP_LOG_LEVEL: Logging level name (default: "WARNING")
        """
        return cls(
            encoding=os.getenv("GDEP_ENCODING") or None,
            log_level=os.getenv("GDEP_LOG_LEVEL", "WARNING").upper(),
        )

    def validate(self) -> None:
        """Validate the configuration.

        Raises:
            ValueError: If the encoding or log level is not recognized.
        """
        if self.encoding is not None:
            try:
                codecs.lookup(self.encoding)
            except LookupError:
                raise ValueError(f"Unknown GDEP_ENCODING: {self.encoding}") from None
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown GDEP_LOG_LEVEL: {self.log_level}")
