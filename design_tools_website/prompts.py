"""Interactive prompt helpers built on click.

Every prompt returns either the answer or a `Cancelled` marker. Nothing in
here exits the process; callers pass `Cancelled` up to the command.
"""

from dataclasses import dataclass
from typing import Any
from typing import Callable
from typing import List
from typing import Optional
from typing import Sequence
from typing import Tuple
from urllib.parse import urlparse

import click

from design_tools_website.seo_utils import generate_slug


@dataclass(frozen=True)
class Cancelled:
    """The operator backed out of a prompt or declined a destructive step."""

    message: str = "Operation cancelled"


def is_cancelled(value: Any) -> bool:
    return isinstance(value, Cancelled)


# Validators, used as click `value_proc` callables. Raising BadParameter makes
# click print the message and ask again.


def required(message: str) -> Callable[[str], str]:
    def validate(value: str) -> str:
        value = value.strip()
        if not value:
            raise click.BadParameter(message)
        return value

    return validate


def min_length(length: int, message: str) -> Callable[[str], str]:
    def validate(value: str) -> str:
        if len(value) < length:
            raise click.BadParameter(message)
        return value

    return validate


def sluggable(message: str) -> Callable[[str], str]:
    """Reject text that would produce an empty slug."""

    def validate(value: str) -> str:
        if not generate_slug(value):
            raise click.BadParameter(message)
        return value

    return validate


def chain(*validators: Callable[[str], Any]) -> Callable[[str], Any]:
    def validate(value: str) -> Any:
        for validator in validators:
            value = validator(value)
        return value

    return validate


def valid_url(value: str) -> str:
    value = value.strip()
    if not value:
        raise click.BadParameter("URL is required")
    parsed = urlparse(value)
    if not parsed.scheme or not parsed.netloc:
        raise click.BadParameter("Please enter a valid URL")
    return value


def comma_separated_tags(value: str) -> List[str]:
    tags = [tag.strip() for tag in value.split(",")]
    tags = [tag for tag in tags if tag]
    if not tags:
        raise click.BadParameter("At least one tag is required")
    return tags


class Prompter:
    """click-backed prompts and status lines for the authoring flows."""

    def text(
        self,
        message: str,
        validate: Optional[Callable[[str], Any]] = None,
        placeholder: Optional[str] = None,
    ) -> Any:
        if placeholder:
            click.secho(f"  e.g. {placeholder}", dim=True)
        try:
            # An empty default lets validators report missing input instead of click re-asking silently
            return click.prompt(message, default="", show_default=False, value_proc=validate)
        except click.Abort:
            return Cancelled()

    def confirm(self, message: str, default: bool = True) -> Any:
        try:
            return click.confirm(message, default=default)
        except click.Abort:
            return Cancelled()

    def select(self, message: str, options: Sequence[Tuple[str, str]]) -> Any:
        click.echo(message)
        for number, (_, label) in enumerate(options, 1):
            click.echo(f"  {number}) {label}")
        try:
            choice = click.prompt("Choice", type=click.IntRange(1, len(options)))
        except click.Abort:
            return Cancelled()
        return options[choice - 1][0]

    def info(self, message: str) -> None:
        click.secho(message, fg="cyan")

    def success(self, message: str) -> None:
        click.secho(message, fg="green")

    def warn(self, message: str) -> None:
        click.secho(message, fg="yellow")

    def error(self, message: str) -> None:
        click.secho(message, fg="red", err=True)
