"""Interactive command for adding categories and tools to the catalog."""

import logging

import click

from design_tools_website.authoring import add_tool
from design_tools_website.authoring import create_category
from design_tools_website.logging_config import setup_logging
from design_tools_website.prompts import Prompter
from design_tools_website.prompts import is_cancelled

logger = logging.getLogger(__name__)

ACTIONS = [
    ("create-category", "Create a new tool category"),
    ("add-tool", "Add a tool to existing category"),
]


@click.command()
def main() -> None:
    """Add design tools and categories to the catalog interactively."""
    # Prompts own the console, so only warnings and errors are echoed there
    setup_logging(console_level=logging.WARNING)
    prompter = Prompter()

    click.secho("Design Tools CLI", bold=True)
    action = prompter.select("What would you like to do?", ACTIONS)

    if is_cancelled(action):
        outcome = action
    elif action == "create-category":
        outcome = create_category(prompter)
    else:
        outcome = add_tool(prompter)

    if is_cancelled(outcome):
        logger.info("Authoring flow cancelled")
        click.secho(outcome.message, fg="yellow")
        return

    click.secho("Done!", fg="green")


if __name__ == "__main__":
    main()
