"""Module entrypoint for ``python -m recent``.

This keeps module-mode execution behavior identical to the CLI script.
All argument parsing and output setup happen in ``recent.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
