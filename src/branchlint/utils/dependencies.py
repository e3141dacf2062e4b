from pathlib import Path
from typing import Annotated, Optional

import typer
from typer import Option

from branchlint.config import Policy, load_config
from branchlint.core.errors import BranchLintError
from branchlint.core.git_service import get_current_branch
from branchlint.core.reporter import report_error
from branchlint.messages import branch as msg


def get_policy(
    config_file: Annotated[
        Optional[Path], Option("--config", "-c", help="Path to config file")
    ] = None,
) -> Policy:
    try:
        return load_config(str(config_file) if config_file else None)
    except BranchLintError as e:
        report_error(str(e))
        raise typer.Exit(code=1)


def get_branch_name(
    branch: Annotated[
        Optional[str],
        Option("--branch", "-b", help="Branch name to check instead of the current one"),
    ] = None,
) -> str:
    if branch is not None:
        branch = branch.strip().lower()
        if not branch:
            report_error(msg.EMPTY_BRANCH_NAME)
            raise typer.Exit(code=1)
        return branch

    try:
        return get_current_branch()
    except BranchLintError as e:
        report_error(str(e))
        raise typer.Exit(code=1)
