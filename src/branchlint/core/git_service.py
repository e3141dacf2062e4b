import subprocess
from typing import List, Optional

from branchlint.core.errors import BranchNotFoundError
from branchlint.messages import branch as msg

REF_HEADS_PREFIX = "refs/heads/"


def _run_git(args: List[str]) -> Optional[str]:
    """Run a git command and return the first line of its output, if any."""
    try:
        result = subprocess.run(
            ["git", *args],
            capture_output=True,
            text=True,
            check=True,
        )
    except (subprocess.CalledProcessError, FileNotFoundError):
        return None

    lines = result.stdout.splitlines()
    if not lines or not lines[0].strip():
        return None
    return lines[0].strip()


def normalize_branch_name(raw: str) -> str:
    """Keep the first line, drop the ``refs/heads/`` prefix and lower-case."""
    lines = raw.splitlines()
    first_line = lines[0].strip() if lines else ""
    if first_line.startswith(REF_HEADS_PREFIX):
        first_line = first_line[len(REF_HEADS_PREFIX) :]
    return first_line.lower()


def get_current_branch() -> str:
    """Return the checked-out branch, or the short commit hash on a detached HEAD.

    Raises BranchNotFoundError when git resolves neither.
    """
    output = _run_git(["symbolic-ref", "HEAD"]) or _run_git(["rev-parse", "--short", "HEAD"])
    branch = normalize_branch_name(output) if output else ""
    if not branch:
        raise BranchNotFoundError(msg.UNABLE_TO_DETERMINE_BRANCH)
    return branch
