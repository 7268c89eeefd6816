"""pkgwright: fetch a PKGBUILD, compare versions, build and install with pacman."""

__version__ = "1.0.0"
