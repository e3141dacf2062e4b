from typing import Any, Callable, Dict

import typer
from typer_di import Depends

from branchlint.config import Policy
from branchlint.core.reporter import report_failure, report_success
from branchlint.messages import branch as msg
from branchlint.utils.dependencies import get_branch_name, get_policy
from branchlint.validators.branch import evaluate


def register(app: typer.Typer) -> Dict[str, Callable[..., Any]]:
    @app.command()
    def check_branch(
        branch: str = Depends(get_branch_name),
        policy: Policy = Depends(get_policy),
        quiet: bool = typer.Option(False, "--quiet", "-q", help="Only print failures"),
    ):
        """Validate the branch naming convention."""
        verdict = evaluate(branch, policy, sink=report_failure)

        if verdict.passed and not quiet:
            report_success(msg.BRANCH_VALID.format(branch))
        raise typer.Exit(code=verdict.exit_code)

    return {"check_branch": check_branch}
