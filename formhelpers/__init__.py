# -*- test-case-name: formhelpers.test -*-
from incremental import Version

from formhelpers._version import __version__


def asVersion(packageName, versionString):
    return Version(
            packageName, *map(int, versionString.split('+', 1)[0].split(".")))

version = asVersion("formhelpers", __version__)

__all__ = ['version', '__version__']
