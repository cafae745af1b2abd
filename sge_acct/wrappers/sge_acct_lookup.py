#!/usr/bin/env python3
"""Convenience wrapper: sge-acct-lookup → sge_acct.cli lookup

Allows running the lookup command from a checkout without installing
the console script.
"""


def main():
    """Convenience wrapper that calls the lookup command directly."""
    from sge_acct.cli import lookup

    lookup()


if __name__ == "__main__":
    main()
