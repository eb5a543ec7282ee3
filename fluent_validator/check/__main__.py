"""Module entrypoint for `python -m fluent_validator.check`.

Delegates to the check CLI implementation.
"""

from .run_check import cli


if __name__ == "__main__":
    cli()
