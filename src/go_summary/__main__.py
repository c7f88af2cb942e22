"""Allow ``python -m go_summary``."""

from .cli import app

if __name__ == "__main__":
    app()
