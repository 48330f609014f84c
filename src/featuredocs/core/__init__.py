# topmark:header:start
#
#   project      : FeatureDocs
#   file         : __init__.py
#   file_relpath : src/featuredocs/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core primitives shared across FeatureDocs (errors, enum helpers)."""

from __future__ import annotations
