#!/usr/bin/env python
import sys

from term_ai.cli import main as cli_main
from term_ai.utils.logging import print_error


def main() -> None:
    try:
        cli_main()
        sys.exit(0)
    except Exception as e:
        print_error(f"An unexpected error occurred in the application: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
