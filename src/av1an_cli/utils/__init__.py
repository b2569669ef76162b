"""Utility functions and helpers."""

from .validation import check_constraints
from .logging import setup_logging

__all__ = ['check_constraints', 'setup_logging']
