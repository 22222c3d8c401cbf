"""
fqdncheck - validate fully-qualified domain names and IP literals.

This package checks whether a string is a syntactically well-formed
FQDN or a literal IPv4/IPv6 address, without any DNS resolution.
"""

from .validator import InputValidator, Label, Reason, Verdict, iter_labels, validate, validate_fqdn

__version__ = "0.1.0"
__author__ = "fqdncheck"
__license__ = "Public Domain"

__all__ = [
    'InputValidator',
    'Label',
    'Reason',
    'Verdict',
    'iter_labels',
    'validate',
    'validate_fqdn',
]
