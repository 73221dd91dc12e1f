"""Main CLI entry point for colorexp."""

import typer

from colorexp.cli.commands.colorize import colorize

app = typer.Typer(
    name="colorexp",
    help="Colorize substrings of standard input that match regular expressions",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("colorize", help="Colorize standard input lines matching the given patterns")(colorize)


def run() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    run()
