# topmark:header:start
#
#   project      : MultipartForm
#   file         : __init__.py
#   file_relpath : src/multipartform/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""Configuration handling for MultipartForm.

Submodules:

- ``logging``: TRACE level, colored formatter and logger factory.
- ``keys``: TOML section and key names.
- ``io``: TOML loading (``tomlkit``) and checked value getters.
- ``model``: the frozen `Config` snapshot and its `MutableConfig` builder.

This package deliberately imports nothing at module import time; library modules
import ``multipartform.config.logging`` during their own initialization.
"""

from __future__ import annotations
