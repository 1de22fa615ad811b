# topmark:header:start
#
#   project      : NumStrKit
#   file         : __main__.py
#   file_relpath : src/numstrkit/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running NumStrKit via ``python -m numstrkit``.

Equivalent to running the ``numstrkit`` console script; delegates to
:func:`numstrkit.cli.main.cli`.

Examples:
    Round a value using the module interface::

        python -m numstrkit round --mode half_to_even --digits 0 6.5
"""

from __future__ import annotations

from numstrkit.cli.main import cli

if __name__ == "__main__":
    cli()
