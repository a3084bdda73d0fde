"""Module entrypoint for ``python -m annotree``.

This keeps module-mode execution behavior identical to the CLI script.
All argument parsing and run setup happen in ``annotree.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
