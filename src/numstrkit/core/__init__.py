# topmark:header:start
#
#   project      : NumStrKit
#   file         : __init__.py
#   file_relpath : src/numstrkit/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic number-string primitives.

The ``numstrkit.core`` package holds the pure computational layer. It performs
no I/O and is safe to import from anywhere (formatting, config, CLI, tests).

Included modules:

- ``kernel``
  `DecimalValue` plus the native and dirty parsers and the native formatter.

- ``rounding``
  `RoundingMode`, `RoundingRequest` and the `round_value` engine.

- ``errors``
  The `NumStrError` hierarchy raised for invalid input.

- ``enum_mixins``
  `KeyedStrEnum`, the tolerant keyed enum used for every closed vocabulary.
"""

from __future__ import annotations
