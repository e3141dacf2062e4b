"""branchlint: validate git branch names against a naming policy."""

__version__ = "0.1.0"
