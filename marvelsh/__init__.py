"""A small interactive shell with quoting, variable expansion, syntax checks and builtins."""

__version__ = "0.1.0"