"""Installed CapsuleKit version."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("capsulekit")
except PackageNotFoundError:
    __version__ = "0.0.0"
