"""ghproj CLI - work with GitHub Projects from the command line."""

__version__ = "0.1.0"
