"""Module entrypoint for `python -m nvc_exercises`."""

from .cli import main_entry

if __name__ == "__main__":  # pragma: no cover
    main_entry()
