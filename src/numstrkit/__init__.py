# topmark:header:start
#
#   project      : NumStrKit
#   file         : __init__.py
#   file_relpath : src/numstrkit/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NumStrKit package.

NumStrKit parses decimal numbers out of native and "dirty" number strings,
rounds them with a selectable rounding mode, and renders them back out as
native or locale-formatted number strings. It exposes both a CLI and a small
typed API for automation (see `numstrkit.api`).
"""

from __future__ import annotations
