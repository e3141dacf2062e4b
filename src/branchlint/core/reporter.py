import typer

from branchlint.messages import branch as msg


def report_failure(message: str) -> None:
    """Write a lint diagnostic to stderr."""
    typer.secho(f"{msg.LINT_FAIL_LABEL} {message}", fg=typer.colors.RED, err=True)


def report_error(message: str) -> None:
    typer.secho(f"✘ {message}", fg=typer.colors.RED, err=True)


def report_success(message: str) -> None:
    typer.secho(f"✔ {message}", fg=typer.colors.GREEN)
