"""
Input validation utilities.

This module decides whether a string is a syntactically well-formed
fully-qualified domain name or a literal IPv4/IPv6 address. Failures are
returned as a ``Verdict`` carrying a ``Reason``; nothing here raises for
string input.
"""

import ipaddress
import logging
import string
from enum import Enum
from typing import Iterator, NamedTuple, Optional

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 255
MAX_LABEL_LENGTH = 63

LABEL_SEPARATOR = '.'
BOUNDARY_CHARS = frozenset('-.')

ALPHA_CHARS = frozenset(string.ascii_letters)
ALNUM_CHARS = frozenset(string.ascii_letters + string.digits)


class Reason(Enum):
    """Why a string was rejected as a domain name."""
    INVALID_CHARS = "Invalid characters found in string"
    INVALID_LABEL_START = ("Invalid first character found in string label "
                           "(example 'subdomain.-domain')")
    # Never produced by the label scan: a trailing dot surfaces as an
    # empty label (INVALID_CHARS).
    INVALID_LABEL_END = ("Invalid last character found in string label "
                         "(example 'subdomain.domain.')")
    TOO_LONG = "String is too long (> %d)" % MAX_NAME_LENGTH
    LABEL_TOO_LONG = "Too long label (> %d)" % MAX_LABEL_LENGTH

    def __str__(self):
        return self.value


class Verdict(NamedTuple):
    """Outcome of a validation: valid, or invalid with a reason."""
    valid: bool
    reason: Optional[Reason] = None
    kind: str = 'invalid'

    @classmethod
    def ok(cls, kind: str = 'fqdn') -> 'Verdict':
        return cls(True, None, kind)

    @classmethod
    def fail(cls, reason: Reason) -> 'Verdict':
        return cls(False, reason, 'invalid')

    def __bool__(self):
        return self.valid


class Label(NamedTuple):
    """Position of one dot-delimited label inside a name."""
    start: int
    length: int
    is_last: bool

    def text(self, name: str) -> str:
        return name[self.start:self.start + self.length]


def iter_labels(name: str) -> Iterator[Label]:
    """
    Split a name into labels, left to right.

    Every separator is followed by a label, so a trailing dot or two
    consecutive dots yield an empty label instead of being skipped.

    Args:
        name: Candidate domain name

    Yields:
        Label tuples; the final one has ``is_last`` set
    """
    position = 0
    while True:
        end = name.find(LABEL_SEPARATOR, position)
        if end == -1:
            yield Label(position, len(name) - position, True)
            return
        yield Label(position, end - position, False)
        position = end + 1


def _check_label(name: str, label: Label) -> Optional[Reason]:
    if label.length == 0:
        return Reason.INVALID_CHARS

    if label.length > MAX_LABEL_LENGTH:
        return Reason.LABEL_TOO_LONG

    text = label.text(name)

    # '.' can never sit at a label boundary after splitting; kept as a guard.
    if text[0] in BOUNDARY_CHARS or text[-1] in BOUNDARY_CHARS:
        return Reason.INVALID_LABEL_START

    # The top-level label is letters only, digits included in the ban.
    allowed = ALPHA_CHARS if label.is_last else ALNUM_CHARS
    for char in text:
        if char not in allowed:
            return Reason.INVALID_CHARS

    return None


def validate_fqdn(name: str) -> Verdict:
    """
    Validate a fully-qualified domain name.

    Rules, first failure wins:
      - total length at most 255 characters
      - first character is an ASCII letter or digit
      - no empty labels, each label at most 63 characters
      - no '-' at the start or end of a label
      - non-final labels are ASCII alphanumeric, the final label is
        ASCII letters only

    Args:
        name: String to validate

    Returns:
        ``Verdict.ok('fqdn')`` or ``Verdict.fail(reason)``

    Raises:
        TypeError: If name is not a string
    """
    if not isinstance(name, str):
        raise TypeError(f"Expected str, got {type(name).__name__}")

    if len(name) > MAX_NAME_LENGTH:
        return _reject(name, Reason.TOO_LONG)

    if not name or name[0] not in ALNUM_CHARS:
        return _reject(name, Reason.INVALID_LABEL_START)

    for label in iter_labels(name):
        reason = _check_label(name, label)
        if reason is not None:
            return _reject(name, reason, label)

    return Verdict.ok('fqdn')


def _reject(name: str, reason: Reason, label: Optional[Label] = None) -> Verdict:
    if label is None:
        logger.debug("Rejected %r: %s", name, reason.name)
    else:
        logger.debug("Rejected %r at label offset %d: %s", name, label.start, reason.name)
    return Verdict.fail(reason)


class InputValidator:
    """Validator for IP literals and fully-qualified domain names."""

    def is_ipv4(self, ip_string: str) -> bool:
        """
        Check if string is a dotted-quad IPv4 literal.

        Args:
            ip_string: Candidate address, taken as-is (no whitespace stripping)

        Returns:
            True if valid IPv4 address, False otherwise
        """
        try:
            ipaddress.IPv4Address(ip_string)
            return True
        except ValueError:
            return False

    def is_ipv6(self, ip_string: str) -> bool:
        """
        Check if string is an IPv6 literal.

        Zone identifiers such as ``fe80::1%eth0`` are not accepted.

        Args:
            ip_string: Candidate address, taken as-is (no whitespace stripping)

        Returns:
            True if valid IPv6 address, False otherwise
        """
        if '%' in ip_string:
            return False
        try:
            ipaddress.IPv6Address(ip_string)
            return True
        except ValueError:
            return False

    def is_ip_literal(self, ip_string: str) -> bool:
        """Check if string is an IPv4 or IPv6 literal."""
        return self.is_ipv4(ip_string) or self.is_ipv6(ip_string)

    def validate_fqdn(self, domain_string: str) -> Verdict:
        """Validate a domain name only; IP literals get no special treatment."""
        return validate_fqdn(domain_string)

    def validate(self, input_string: str) -> Verdict:
        """
        Validate input as an IP literal or a fully-qualified domain name.

        IP literals short-circuit: IPv4 is tried first, then IPv6, and a
        match is accepted without applying any label rules.

        Args:
            input_string: String to validate

        Returns:
            Verdict whose ``kind`` is 'ipv4', 'ipv6', 'fqdn' or 'invalid'
        """
        if not isinstance(input_string, str):
            raise TypeError(f"Expected str, got {type(input_string).__name__}")

        if self.is_ipv4(input_string):
            logger.debug("Accepted %r as IPv4 literal", input_string)
            return Verdict.ok('ipv4')
        if self.is_ipv6(input_string):
            logger.debug("Accepted %r as IPv6 literal", input_string)
            return Verdict.ok('ipv6')

        return validate_fqdn(input_string)

    def is_valid_input(self, input_string: str) -> bool:
        """
        Determine if input is a valid IP literal or domain name.

        Args:
            input_string: String to validate

        Returns:
            True if valid, False otherwise
        """
        return self.validate(input_string).valid

    def get_input_type(self, input_string: str) -> str:
        """
        Determine the type of input.

        Args:
            input_string: String to classify

        Returns:
            'ipv4', 'ipv6', 'fqdn', or 'invalid' if it is none of them
        """
        return self.validate(input_string).kind


_default_validator = InputValidator()


def validate(input_string: str) -> Verdict:
    """Validate input as an IP literal or FQDN with a shared validator."""
    return _default_validator.validate(input_string)
