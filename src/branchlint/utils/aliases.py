import typer

ALIAS_MAP = {
    "check_branch": ["cb"],
    "init_config": ["init"],
}


def register_command_aliases(app: typer.Typer, namespace: dict) -> None:
    """Register short aliases for commonly used commands.

    ``namespace`` maps command function names to the functions, as returned
    by the ``register`` helpers of each command module.
    """

    for func_name, aliases in ALIAS_MAP.items():
        func = namespace.get(func_name)
        if func is None:
            continue
        for alias in aliases:
            app.command(name=alias, hidden=True)(func)
