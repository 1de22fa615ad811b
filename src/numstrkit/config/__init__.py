# topmark:header:start
#
#   project      : NumStrKit
#   file         : __init__.py
#   file_relpath : src/numstrkit/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for NumStrKit.

Submodules:
    - `numstrkit.config.logging`: TRACE-aware logging setup (imported by every module,
      so this package initializer stays import-free).
    - `numstrkit.config.keys`: canonical TOML section and key names.
    - `numstrkit.config.io`: TOML discovery, loading, checked getters and rendering
      (``tomlkit``).
    - `numstrkit.config.model`: `Config` / `MutableConfig` and the merge policy.

Configuration warnings are collected in `numstrkit.core.diagnostics.DiagnosticLog`.
"""

from __future__ import annotations
