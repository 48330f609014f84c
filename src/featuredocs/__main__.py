# topmark:header:start
#
#   project      : FeatureDocs
#   file         : __main__.py
#   file_relpath : src/featuredocs/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running FeatureDocs via ``python -m featuredocs``.

Delegates to :func:`featuredocs.cli.main.cli`, so both launch styles share a
single CLI entry point.

Examples:
    Validate the documents of the current project::

        python -m featuredocs check
"""

from __future__ import annotations

from featuredocs.cli.main import cli

if __name__ == "__main__":
    cli()
