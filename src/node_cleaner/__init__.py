"""node-cleaner - find and delete node_modules directories in parallel."""

__version__ = "0.1.0"
