"""
Module entry point for: python -m trebuchet

Allows running the solvers directly as a module:
    python -m trebuchet solve --day <n> --input <path> [options]
    python -m trebuchet days
"""

from .cli import cli


def main():
    cli()


if __name__ == "__main__":
    main()
