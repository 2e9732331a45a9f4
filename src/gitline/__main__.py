"""Module entrypoint for ``python -m gitline``."""

from .cli import main

if __name__ == "__main__":
    main()
