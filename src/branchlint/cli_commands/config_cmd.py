import os
from typing import Any, Callable, Dict

import toml
import typer
from typer_di import Depends

from branchlint.config import CONFIG_SECTION, Policy, build_policy, policy_as_dict
from branchlint.core.reporter import report_success
from branchlint.messages import branch as msg
from branchlint.utils.dependencies import get_policy

CONFIG_HEADER = """# branchlint configuration file
#
# Every key is optional; a key set here replaces the default value entirely.
# Message templates take positional placeholders ("{}" or "%s").

"""


def render_config(policy: Policy) -> str:
    return toml.dumps({CONFIG_SECTION: policy_as_dict(policy)})


def register(app: typer.Typer) -> Dict[str, Callable[..., Any]]:
    @app.command()
    def init_config(
        path: str = typer.Option(".branchlint.toml", "--path", "-p", help="Config file path"),
        force: bool = typer.Option(False, "--force", "-f", help="Overwrite without asking"),
    ):
        """Generate example configuration file."""

        if os.path.exists(path) and not force:
            overwrite = typer.confirm(msg.CONFIG_FILE_EXISTS.format(path))
            if not overwrite:
                typer.echo(msg.CANCELLED)
                raise typer.Exit(code=0)

        with open(path, "w") as f:
            f.write(CONFIG_HEADER + render_config(build_policy()))

        report_success(msg.CONFIG_FILE_CREATED.format(path))

    @app.command()
    def show_config(policy: Policy = Depends(get_policy)):
        """Print the effective policy."""
        typer.echo(render_config(policy), nl=False)

    return {"init_config": init_config, "show_config": show_config}
