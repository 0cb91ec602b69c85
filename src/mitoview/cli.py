"""Command-line interface for MitoView.

ARCHITECTURE:
    CLI Commands → ReviewSession → LocalDataClient → JSON Output

Workflows: summary, filter (saved search or column filters), saved-search
management, and settings export.

Key Design:
- Typer framework for auto-help and type validation
- asyncio.run() bridges sync CLI → async session
- Data server URL and load timeout from options, environment or .env
"""

import asyncio
import json
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

from mitoview.api.local_data import LocalDataClient
from mitoview.filters import column_filters_match
from mitoview.models.search import FilterConfig, VariantSearch
from mitoview.session import ReviewSession

load_dotenv()

app = typer.Typer(
    name="mitoview",
    help="Review and filter mitochondrial variant calls",
    add_completion=False,
)

DataUrlOption = typer.Option(
    LocalDataClient.DEFAULT_BASE_URL, "--data-url", envvar="MITOVIEW_DATA_URL", help="Data server URL"
)
TimeoutOption = typer.Option(
    None, "--timeout", envvar="MITOVIEW_LOAD_TIMEOUT", help="Load timeout in seconds"
)
LogOption = typer.Option(True, "--log/--no-log", help="Enable review action logging")


async def _load(session: ReviewSession) -> None:
    """Load session data or exit with the notification message."""
    if not await session.fetch_data():
        print(f"Error: {session.state.snackbar.message}")
        raise typer.Exit(1)


def _session(data_url: str, timeout: Optional[float], log: bool) -> ReviewSession:
    return ReviewSession(LocalDataClient(base_url=data_url), load_timeout=timeout, enable_logging=log)


@app.command()
def summary(
    data_url: str = DataUrlOption,
    timeout: Optional[float] = TimeoutOption,
    log: bool = LogOption,
) -> None:
    """Show the sample under review and its saved searches."""

    async def run_summary() -> None:
        async with _session(data_url, timeout, log) as session:
            await _load(session)

            print(f"\nSample: {session.sample}")
            print(f"Variants: {len(session.state.variants)} | Max read depth: {session.max_read_depth}")
            print(f"BAM file: {session.bam_file or 'not set'}")

            print("\nSaved searches:")
            for search in session.variant_searches:
                marker = "*" if search.custom else " "
                print(f"  {marker} {search.name}: {search.description or ''}")

    asyncio.run(run_summary())


@app.command(name="filter")
def filter_variants(
    search: Optional[str] = typer.Option(None, "--search", "-s", help="Saved search name"),
    position: Optional[str] = typer.Option(None, "--position", help="Position range (e.g., 3000-4000)"),
    vaf: Optional[str] = typer.Option(None, "--vaf", help="VAF range (e.g., 0.01-0.1)"),
    depth: Optional[str] = typer.Option(None, "--depth", help="Read depth range (e.g., 100-)"),
    gene: Optional[str] = typer.Option(None, "--gene", help="Gene substring"),
    allele: Optional[str] = typer.Option(None, "--allele", help="Allele substring (e.g., A/G)"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output JSON file"),
    data_url: str = DataUrlOption,
    timeout: Optional[float] = TimeoutOption,
    log: bool = LogOption,
) -> None:
    """Filter the sample's variants by a saved search and/or column filters."""

    column_filters = {
        "position": position,
        "vaf": vaf,
        "DP": depth,
        "gene": gene,
        "ref_alt": allele,
    }

    async def run_filter() -> None:
        async with _session(data_url, timeout, log) as session:
            await _load(session)

            saved = None
            if search:
                saved = session.find_search(search)
                if saved is None:
                    print(f"Error: No saved search named '{search}' for sample {session.sample}")
                    raise typer.Exit(1)

            variants = [
                variant for variant in session.filtered_variants(saved)
                if column_filters_match(variant, column_filters)
            ]
            print(f"\n{len(variants)}/{len(session.state.variants)} variants match")

            output_data = [variant.model_dump(mode="json", by_alias=True) for variant in variants]
            if output:
                with open(output, "w") as f:
                    json.dump(output_data, f, indent=2)
                print(f"Saved to {output}")
            else:
                for variant in variants:
                    print(
                        f"  {variant.position or '-'}\t{variant.ref_alt}\t{variant.gene or '-'}\t"
                        f"{variant.consequence_name or '-'}\tVAF={variant.vaf}\tDP={variant.read_depth}"
                    )

    asyncio.run(run_filter())


@app.command(name="save-search")
def save_search(
    name: str = typer.Argument(..., help="Search name"),
    config_file: Path = typer.Argument(..., help="JSON file with the filter configuration"),
    description: str = typer.Option("", "--description", "-d", help="Search description"),
    data_url: str = DataUrlOption,
    timeout: Optional[float] = TimeoutOption,
    log: bool = LogOption,
) -> None:
    """Create or update a custom saved search and persist settings."""

    if not config_file.exists():
        print(f"Error: Filter configuration file not found: {config_file}")
        raise typer.Exit(1)

    with open(config_file, "r") as f:
        filter_config = FilterConfig.model_validate(json.load(f))

    async def run_save() -> None:
        async with _session(data_url, timeout, log) as session:
            await _load(session)

            session.save_search(
                VariantSearch(name=name, description=description, custom=True, filter_config=filter_config)
            )
            if not await session.save_settings():
                print(f"Error: {session.state.snackbar.message}")
                raise typer.Exit(1)
            print(f"Saved search '{name}' for sample {session.sample}")

    asyncio.run(run_save())


@app.command(name="delete-search")
def delete_search(
    name: str = typer.Argument(..., help="Search name"),
    data_url: str = DataUrlOption,
    timeout: Optional[float] = TimeoutOption,
    log: bool = LogOption,
) -> None:
    """Delete a custom saved search and persist settings."""

    async def run_delete() -> None:
        async with _session(data_url, timeout, log) as session:
            await _load(session)

            existing = next(
                (vs for vs in session.variant_searches if vs.custom and vs.name == name), None
            )
            if existing is None:
                print(f"Error: No custom saved search named '{name}'")
                raise typer.Exit(1)

            removed = session.delete_search(existing)
            if not await session.save_settings():
                print(f"Error: {session.state.snackbar.message}")
                raise typer.Exit(1)
            print(f"Deleted {removed} saved search(es) named '{name}'")

    asyncio.run(run_delete())


@app.command(name="export-settings")
def export_settings(
    directory: Path = typer.Option(Path("."), "--dir", help="Destination directory"),
    data_url: str = DataUrlOption,
    timeout: Optional[float] = TimeoutOption,
    log: bool = LogOption,
) -> None:
    """Export settings to mitoSettings.json."""

    async def run_export() -> None:
        async with _session(data_url, timeout, log) as session:
            await _load(session)
            path = session.download_settings(directory)
            print(f"Settings exported to {path}")

    asyncio.run(run_export())


@app.command()
def version() -> None:
    """Show version information."""
    from mitoview import __version__
    print(f"MitoView version {__version__}")


if __name__ == "__main__":
    app()
