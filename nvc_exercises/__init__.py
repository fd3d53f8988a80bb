"""NVC Exercises API: bilingual Nonviolent Communication exercises behind API keys."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("nvc-exercises-api")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"
