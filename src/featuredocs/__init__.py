# topmark:header:start
#
#   project      : FeatureDocs
#   file         : __init__.py
#   file_relpath : src/featuredocs/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FeatureDocs package.

FeatureDocs builds a comparison site out of a directory of feature documents.
Each document describes one language feature, declares a support status per
subject (e.g. per programming language) in its front matter, and carries a
free-form markdown narrative. FeatureDocs validates the documents, orders them
and renders them into HTML pages through Jinja templates.
"""

from __future__ import annotations
