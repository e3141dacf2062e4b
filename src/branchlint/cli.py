"""Command-line interface for branchlint."""

from typing import Any, Callable, Dict

from typer_di import TyperDI

from branchlint.cli_commands import branch, config_cmd
from branchlint.utils.aliases import register_command_aliases

app = TyperDI(help="branchlint: enforce branch naming conventions.")

namespace: Dict[str, Callable[..., Any]] = {}
namespace.update(branch.register(app))
namespace.update(config_cmd.register(app))

register_command_aliases(app, namespace)
