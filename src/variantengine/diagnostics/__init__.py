"""Diagnostic system for variant errors.

Provides structured error diagnostics with codes, hints, and formatters.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    VariantError,
    VariantResolutionError,
    VariantStructureError,
    VariantSyntaxError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "OutputFormat",
    "VariantError",
    "VariantResolutionError",
    "VariantStructureError",
    "VariantSyntaxError",
]
