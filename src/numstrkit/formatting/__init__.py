# topmark:header:start
#
#   project      : NumStrKit
#   file         : __init__.py
#   file_relpath : src/numstrkit/formatting/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Display formatting of decimal values.

- ``grouping``: integer digit grouping (thousands, Indian and Chinese numbering).
- ``spec``: the `NumberFormatSpec` record and its enums.
- ``cultures``: country presets (United States, United Kingdom, France, Germany).
- ``render``: `format_number`, which turns a `DecimalValue` into display text.
"""

from __future__ import annotations
