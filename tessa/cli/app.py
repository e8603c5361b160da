"""CLI application definition for Tessa path diagnostics."""

import typer

from tessa.cli.commands import candidates, legacy_dirs, main, rewrite, show

app = typer.Typer(
    add_completion=False,
    help="Inspect Tessa state, config and credential locations.",
    no_args_is_help=True,
)

app.callback()(main)

# Register commands
app.command(name="show", help="Show resolved locations")(show)
app.command(name="candidates", help="List config file candidates in probe order")(candidates)
app.command(name="legacy-dirs", help="List legacy state directories")(legacy_dirs)
app.command(name="rewrite", help="Rewrite the CLI name in a command")(rewrite)
