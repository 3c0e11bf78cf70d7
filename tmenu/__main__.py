"""Module entrypoint for ``python -m tmenu``.

All argument parsing and runtime setup happen in ``tmenu.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
