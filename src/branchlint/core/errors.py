"""Exceptions raised by branchlint."""


class BranchLintError(Exception):
    """Base class for fatal branchlint errors."""


class ConfigError(BranchLintError):
    """The policy configuration is invalid or unreadable."""


class BranchNotFoundError(BranchLintError):
    """No branch or commit could be resolved for HEAD."""
