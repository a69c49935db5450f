"""``python -m cpquote`` and the ``cpquote`` console script."""

import sys

from .cli import run_cli


def main() -> None:
    sys.exit(run_cli())


if __name__ == "__main__":  # pragma: no cover
    main()
