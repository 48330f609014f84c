# topmark:header:start
#
#   project      : FeatureDocs
#   file         : __init__.py
#   file_relpath : src/featuredocs/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostics collected while loading configuration and documents."""

from __future__ import annotations

from featuredocs.diagnostic.model import Diagnostic, DiagnosticLevel, DiagnosticLog

__all__ = [
    "Diagnostic",
    "DiagnosticLevel",
    "DiagnosticLog",
]
