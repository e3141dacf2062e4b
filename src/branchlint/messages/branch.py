# Policy diagnostics. Positional placeholders, filled in order.
BRANCH_BANNED = 'Branches with the name "{}" are not allowed.'
BRANCH_DISALLOWED = 'Pushing to "{}" is not allowed, use git-flow.'
PREFIX_NOT_ALLOWED = 'Branch prefix "{}" is not allowed.'
PREFIX_SUGGESTION = 'Instead of "{}" try "{}".'
SEPARATOR_REQUIRED = 'Branch "{}" must contain a separator "{}".'

# CLI output
LINT_FAIL_LABEL = "Branch name lint fail!"
BRANCH_VALID = "Branch name valid: {}"
EMPTY_BRANCH_NAME = "Branch name must not be empty."
UNABLE_TO_DETERMINE_BRANCH = "Unable to determine branch name using git command."
CONFIG_FILE_CREATED = "Configuration file created: {}"
CONFIG_FILE_EXISTS = "{} already exists. Overwrite?"
CANCELLED = "Cancelled."
