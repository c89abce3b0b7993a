"""
appcli: a small command-line application shell.

Commands:
    hello: Print a greeting for a user
    generate-report: Write a timestamped report into the data directory

Quick Start::

    from appcli.cli import main

    main(["hello", "world"])            # prints "Hello world!"
    main(["generate-report"])           # needs APP_DATA_DIR
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
