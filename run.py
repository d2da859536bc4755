import logging
import typer
from pathlib import Path
from typing import Optional
from remindcal.dates import Fixed
from remindcal.generator import ReminderGenerator

app = typer.Typer()

def configure_logging(verbose: int):
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

def build_generator(config: Optional[Path], today: Optional[str]) -> ReminderGenerator:
    return ReminderGenerator(settings_path=config, today=Fixed.parse(today) if today else None)

@app.command()
def show(
    config: Optional[Path] = typer.Option(None, help="Settings file (defaults to config/settings.yaml)"),
    data_dir: Optional[Path] = typer.Option(None, help="Directory holding the .rce record files"),
    today: Optional[str] = typer.Option(None, help="Use this date as today, written d,m,y"),
    skip_invalid: bool = typer.Option(False, help="Warn about malformed records instead of stopping"),
    color: bool = typer.Option(True, help="Color the event kinds"),
    verbose: int = typer.Option(0, "--verbose", "-v", count=True, help="Log found files (-v) and parsed records (-vv)"),
):
    """
    Show the next reminders of every kind.
    """
    configure_logging(verbose)
    try:
        gen = build_generator(config, today)
        gen.load(data_dir, skip_invalid=skip_invalid)
        typer.echo(gen.render(color=color), nl=False)

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

@app.command()
def verify_data(
    config: Optional[Path] = typer.Option(None, help="Settings file (defaults to config/settings.yaml)"),
    data_dir: Optional[Path] = typer.Option(None, help="Directory holding the .rce record files"),
):
    """Parse every record file without printing reminders."""
    try:
        gen = build_generator(config, None)
        gen.load(data_dir)
    except Exception as e:
        typer.echo(f"❌ Records invalid: {e}")
        raise typer.Exit(code=1)
    typer.echo("✅ Records valid!")
    typer.echo(f"Found {gen.records} records in {len(gen.files)} files.")
    for kind, count in gen.counts().items():
        typer.echo(f"Found {count} {kind.label} events.")

if __name__ == "__main__":
    app()
