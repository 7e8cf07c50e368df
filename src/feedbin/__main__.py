"""Allows `python -m feedbin ...`."""

from feedbin.cli.main import run

if __name__ == "__main__":
    run()
