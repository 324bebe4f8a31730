"""pkgrun — run package scripts and local executables with lifecycle hooks."""

__version__ = "0.1.0"
