"""Module entrypoint for ``python -m rfind``.

All argument parsing and search setup happen in ``rfind.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
