# topmark:header:start
#
#   project      : NumStrKit
#   file         : __init__.py
#   file_relpath : src/numstrkit/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command-line interface for NumStrKit.

Entry point: `numstrkit.cli.main.cli` (installed as the ``numstrkit`` script).
"""

from __future__ import annotations
