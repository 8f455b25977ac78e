"""Azure management-plane clients."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("az-mgmt")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"
