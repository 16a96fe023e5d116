import json
import logging
import typer
from pathlib import Path
from typing import Optional
from calendar_fetcher.client import HolidayApiClient, HolidayApiError
from calendar_fetcher.export import holidays_to_csv, holidays_to_json, write_export
from calendar_fetcher.generator import generate_year, minimal_payload
from calendar_fetcher.surface import SvgSurface

app = typer.Typer()

PROFILES_PATH = Path("config") / "render_profiles.yaml"


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging")):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def countries():
    """List the countries the holiday API knows about."""
    try:
        result = HolidayApiClient().available_countries()
    except HolidayApiError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    for c in sorted(result, key=lambda c: c.name):
        typer.echo(f"{c.country_code}  {c.name}")


@app.command()
def fetch(
    year: int = typer.Argument(..., help="Calendar year"),
    country: str = typer.Argument(..., help="ISO country code, e.g. DE"),
    csv_path: Optional[Path] = typer.Option(None, "--csv", help="Write holidays as CSV"),
    json_path: Optional[Path] = typer.Option(None, "--json", help="Write holidays as JSON"),
):
    """
    Fetch public holidays for a country and year.
    """
    try:
        holidays = HolidayApiClient().public_holidays(year, country)
    except HolidayApiError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    for h in holidays:
        typer.echo(f"{h.date}  {h.local_name} ({h.name})")
    typer.echo(f"Found {len(holidays)} holidays.")

    if csv_path:
        write_export(csv_path, holidays_to_csv(holidays))
        typer.echo(f"CSV exported to {csv_path}")
    if json_path:
        write_export(json_path, holidays_to_json(holidays))
        typer.echo(f"JSON exported to {json_path}")


@app.command()
def generate(
    year: int = typer.Argument(..., help="Calendar year"),
    country: Optional[str] = typer.Option(None, help="Fetch holidays for this country code"),
    holidays_file: Optional[Path] = typer.Option(None, "--holidays", help="Read holidays from a JSON file instead"),
    style: Optional[str] = typer.Option(None, help="grid or nogrid (overrides the profile)"),
    week_starts_on: Optional[int] = typer.Option(None, help="0 = Sunday, 1 = Monday (overrides the profile)"),
    profile: Optional[str] = typer.Option(None, help="Render profile to use (defined in config/render_profiles.yaml; 'default' when omitted)"),
    output: Path = typer.Option(Path("output") / "calendar.svg", help="SVG file to write"),
):
    """
    Draw a 12-month calendar as SVG. Holidays are optional.
    """
    from calendar_fetcher.utils import get_profile, load_holidays_file
    try:
        settings = {}
        if profile:
            settings = get_profile(profile, PROFILES_PATH).settings.to_payload()
        elif PROFILES_PATH.exists():
            settings = get_profile("default", PROFILES_PATH).settings.to_payload()

        holidays = []
        if holidays_file:
            holidays = load_holidays_file(holidays_file)
        elif country:
            try:
                holidays = HolidayApiClient().public_holidays(year, country)
            except HolidayApiError as e:
                typer.echo(f"Holiday fetch failed, generating without holidays: {e}", err=True)
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if style:
        settings["renderStyle"] = style
    if week_starts_on is not None:
        settings["weekStartsOn"] = week_starts_on

    surface = SvgSurface(title=f"Calendar {year}")
    status = generate_year(year, json.dumps(minimal_payload(holidays)), json.dumps(settings), surface)
    typer.echo(status)
    if not status.startswith("Generated"):
        raise typer.Exit(code=1)

    surface.save(output)
    typer.echo(f"Saved: {output}")


@app.command()
def verify_config():
    """Load and validate configuration files without generating anything."""
    from calendar_fetcher.utils import load_render_profiles
    try:
        p = load_render_profiles(PROFILES_PATH)
        typer.echo("✅ Configuration valid!")
        typer.echo(f"Found {len(p.profiles)} render profiles.")
        for name, prof in p.profiles.items():
            typer.echo(f"  {name}: {prof.description} ({prof.settings.render_style})")
    except Exception as e:
        typer.echo(f"❌ Configuration invalid: {e}")
        raise typer.Exit(code=1)

if __name__ == "__main__":
    app()
