"""
Run configuration for fqdncheck.

The configuration is an explicit object handed to the output routine.
Nothing is read from the environment or from configuration files.
"""

import logging
import sys
from typing import Optional, TextIO

logger = logging.getLogger(__name__)

VERBOSE_FLAG = '-v'


class CheckConfig:
    """Options recognized by a single validation run."""

    def __init__(self, verbose: bool = False, stream: Optional[TextIO] = None):
        """
        Initialize configuration.

        Args:
            verbose: Print diagnostic lines describing the verdict
            stream: Where diagnostics go; stdout when not given
        """
        self.verbose = verbose
        self._stream = stream

    @classmethod
    def from_flag(cls, flag: Optional[str], stream: Optional[TextIO] = None) -> 'CheckConfig':
        """
        Build configuration from the optional leading command-line token.

        Args:
            flag: The token before the string to validate, or None

        Returns:
            Configuration instance

        Raises:
            ValueError: If the token is not a recognized option
        """
        if flag is None:
            return cls(stream=stream)
        if flag != VERBOSE_FLAG:
            raise ValueError(f"Invalid first argument '{flag}'")
        logger.debug("Verbose output enabled")
        return cls(verbose=True, stream=stream)

    @property
    def stream(self) -> TextIO:
        # Resolved late so captured/redirected stdout is honoured.
        return self._stream if self._stream is not None else sys.stdout

    def is_verbose(self) -> bool:
        """
        Check if verbose output is enabled.

        Returns:
            True if diagnostic lines should be printed
        """
        return bool(self.verbose)

    def __repr__(self):
        return f"CheckConfig(verbose={self.verbose!r})"
