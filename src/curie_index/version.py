"""Version information for :mod:`curie_index`."""

__all__ = [
    "VERSION",
    "get_version",
]

VERSION = "0.1.0-dev"


def get_version() -> str:
    """Get the :mod:`curie_index` version string."""
    return VERSION
