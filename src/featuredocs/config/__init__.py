# topmark:header:start
#
#   project      : FeatureDocs
#   file         : __init__.py
#   file_relpath : src/featuredocs/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FeatureDocs configuration.

Submodules:
    - `featuredocs.config.model`: immutable `Config` and the `MutableConfig` builder.
    - `featuredocs.config.io`: TOML loading and typed value getters.
    - `featuredocs.config.keys`: canonical TOML section and key names.
    - `featuredocs.config.logging`: logger class, TRACE level and formatter.

This package module stays import-light so that `featuredocs.config.logging`
can be imported from anywhere without pulling in the config model.
"""

from __future__ import annotations
