import typer


def prompt_for_changes() -> bool:
    answer = typer.prompt(
        "Proceed with the changes? [Y/n]",
        default="Y",
        show_default=False,
    )
    return answer.strip().upper() == "Y"


def next_page() -> bool:
    answer = typer.prompt("---More---", default="", show_default=False)
    return answer[:1].lower() != "q"
