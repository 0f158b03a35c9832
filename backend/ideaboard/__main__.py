"""Entry point for `python -m ideaboard`."""

from ideaboard.main import run

if __name__ == "__main__":
    run()
