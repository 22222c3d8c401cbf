"""
Verbosity-gated output for fqdncheck.

Diagnostic lines are only written when the run configuration asks for
them; otherwise the exit status is the only signal.
"""

from typing import Optional

from .config import CheckConfig
from .validator import Reason, Verdict

VALID_MESSAGE = "The string is a valid FQDN."
INVALID_MESSAGE = "The string is not a valid FQDN."


class VerbosePrinter:
    """Writes human-readable diagnostics when verbose output is on."""

    def __init__(self, config: Optional[CheckConfig] = None):
        self.config = config or CheckConfig()

    def print(self, message: str):
        """
        Print one line if verbose output is enabled.

        Args:
            message: Line to print, without trailing newline
        """
        if not self.config.is_verbose():
            return

        print(message, file=self.config.stream)

    def report_reason(self, reason: Reason):
        """Print the description of a rejection reason."""
        self.print(reason.value)

    def report_verdict(self, verdict: Verdict):
        """
        Print the failure reason, if any, followed by the summary line.

        Args:
            verdict: Result of a validation run
        """
        if verdict.reason is not None:
            self.report_reason(verdict.reason)

        self.print(VALID_MESSAGE if verdict.valid else INVALID_MESSAGE)
