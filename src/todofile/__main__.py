"""Allow ``python -m todofile`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m todofile`` behaves identically to the ``todofile``
console script.
"""

from __future__ import annotations

from todofile.cli.app import cli

if __name__ == "__main__":
    cli()
