"""Entry point for `python -m skinkit`."""

import sys


def main():
    from skinkit.app import run_app
    sys.exit(run_app())


if __name__ == "__main__":
    main()
