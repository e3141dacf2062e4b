def format_message(template: str, *args: object) -> str:
    """Fill the positional placeholders of ``template``.

    Both ``{}`` and printf-style ``%s`` placeholders are accepted. Either style
    may use fewer placeholders than there are arguments; the extra arguments
    are dropped.
    """
    if "%s" in template:
        return template % args[: template.count("%s")]
    return template.format(*args)
