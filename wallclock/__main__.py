"""
Convenience entry point for running wallclock directly.

Usage: python -m wallclock [command] [options]
"""

from .cli.app import app

if __name__ == "__main__":
    app()
