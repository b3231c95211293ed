"""Guided review tours for unified diffs."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("difftour")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
