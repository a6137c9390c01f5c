"""
ichigen — Module entry point.

Allows running the generator directly via::

    python -m ichigen g full product --domain=catalog
"""

from __future__ import annotations


def main() -> None:
    """Delegate to the CLI main function."""
    from ichigen.cli import cli_main
    cli_main()


if __name__ == "__main__":
    main()
