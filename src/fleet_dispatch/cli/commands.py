"""
Fleet Dispatch CLI Commands.

Provides CLI access to the dispatch services (trip pricing, maintenance
routing, content generation) and to registry and discovery inspection.

Exit codes:
    0: success
    1: unknown key, invalid resolver or other dispatch failure
    2: invalid input
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from fleet_dispatch.errors import DispatchError, RequestValidationError
from fleet_dispatch.runtime.container_wiring import get_default_container
from fleet_dispatch.runtime.dispatch_config_loader import load_dispatch_config
from fleet_dispatch.runtime.service_container import ServiceContainer
from fleet_dispatch.runtime.util_logging import configure_logging

console = Console()

EXIT_DISPATCH_ERROR = 1
EXIT_VALIDATION_ERROR = 2


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Dispatch config file (default: FLEET_DISPATCH_CONFIG or ./fleet_dispatch.yaml)",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None) -> None:
    """Fleet dispatch CLI."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


@cli.group()
def trip() -> None:
    """Trip pricing commands."""


@trip.command("cost")
@click.option("--type", "trip_type", required=True, help="Trip type, e.g. local")
@click.option("--distance-km", type=float, required=True, help="Distance in km")
@click.option("--duration-hours", type=float, required=True, help="Duration in hours")
@click.pass_context
def trip_cost_cmd(
    ctx: click.Context, trip_type: str, distance_km: float, duration_hours: float
) -> None:
    """Calculate the cost of a trip."""
    from fleet_dispatch.trip import ServiceTripCost

    with _dispatch_errors():
        service = _container(ctx).resolve_service(ServiceTripCost)
        cost = service.calculate(
            {
                "type": trip_type,
                "distance_km": distance_km,
                "duration_hours": duration_hours,
            }
        )

    table = Table(title=f"Trip Cost ({trip_type.strip().lower()})")
    table.add_column("Component", style="cyan")
    table.add_column("Cost", justify="right")
    for component, value in cost.details.items():
        table.add_row(component, f"{value:.2f}")
    table.add_row("[bold]total_cost[/bold]", f"[bold]{cost.total_cost:.2f}[/bold]")
    console.print(table)


@cli.group()
def maintenance() -> None:
    """Maintenance request commands."""


@maintenance.command("request")
@click.option("--vehicle-id", type=int, required=True, help="Vehicle ID")
@click.option("--issue-type", required=True, help="Issue type, e.g. tires")
@click.option("--description", default=None, help="Issue description")
@click.pass_context
def maintenance_request_cmd(
    ctx: click.Context, vehicle_id: int, issue_type: str, description: str | None
) -> None:
    """Submit a maintenance request."""
    from fleet_dispatch.maintenance import ServiceMaintenance

    with _dispatch_errors():
        service = _container(ctx).resolve_service(ServiceMaintenance)
        outcome = service.submit(
            {
                "vehicle_id": vehicle_id,
                "issue_type": issue_type,
                "description": description,
            }
        )

    console.print(f"[bold green]{outcome.message}[/bold green]")
    for field, value in outcome.to_payload().items():
        console.print(f"  {field + ':':<18} {value}")


@cli.group()
def content() -> None:
    """Content generation commands."""


@content.command("text")
@click.option("--model", default="gpt", show_default=True, help="Model name")
@click.argument("prompt")
@click.pass_context
def content_text_cmd(ctx: click.Context, model: str, prompt: str) -> None:
    """Generate text from PROMPT."""
    from fleet_dispatch.content import ServiceContentGeneration

    with _dispatch_errors():
        service = _container(ctx).resolve_service(ServiceContentGeneration)
        result = service.generate_text(prompt, model=model)
    console.print(result)


@content.command("image")
@click.option("--model", default="gpt", show_default=True, help="Model name")
@click.argument("description")
@click.pass_context
def content_image_cmd(ctx: click.Context, model: str, description: str) -> None:
    """Generate an image from DESCRIPTION."""
    from fleet_dispatch.content import ServiceContentGeneration

    with _dispatch_errors():
        service = _container(ctx).resolve_service(ServiceContentGeneration)
        result = service.generate_image(description, model=model)
    console.print(result)


@cli.group()
def registry() -> None:
    """Registry and discovery inspection."""


@registry.command("list")
@click.pass_context
def registry_list_cmd(ctx: click.Context) -> None:
    """List every dispatch key by domain."""
    from fleet_dispatch.content import RegistryContentModel
    from fleet_dispatch.maintenance import RegistryMaintenance
    from fleet_dispatch.trip import TripStrategyDiscovery

    table = Table(title="Dispatch Keys")
    table.add_column("Domain", style="cyan")
    table.add_column("Key", style="bold")
    table.add_column("Resolver", style="dim")
    table.add_column("Source", style="green")

    with _dispatch_errors():
        container = _container(ctx)
        for registry_cls in (RegistryMaintenance, RegistryContentModel):
            capability_registry = container.resolve_service(registry_cls)
            capability_registry.bootstrap_defaults()
            for key in sorted(capability_registry.keys()):
                entry = capability_registry.entry(key)
                if entry is None:
                    continue
                table.add_row(
                    registry_cls.domain.value if registry_cls.domain else "-",
                    key,
                    entry.resolver_name,
                    entry.resolver_kind.value,
                )

        discovery = container.resolve_service(TripStrategyDiscovery)
        for key, cls in sorted(discovery.get_mapping().items()):
            table.add_row(
                discovery.domain.value if discovery.domain else "-",
                key,
                f"{cls.__module__}.{cls.__qualname__}",
                "discovered",
            )

    console.print(table)


@registry.command("discover")
@click.argument(
    "root",
    required=False,
    type=click.Path(file_okay=False, path_type=Path),
)
@click.pass_context
def registry_discover_cmd(ctx: click.Context, root: Path | None) -> None:
    """Scan ROOT (default: configured trip strategy root) for trip strategies."""
    from fleet_dispatch.trip import TripStrategyDiscovery

    with _dispatch_errors():
        discovery = _container(ctx).resolve_service(TripStrategyDiscovery)
        scan_root = root or discovery.root
        console.print(f"[bold blue]Scanning {scan_root}...[/bold blue]")
        mapping = discovery.scan(scan_root)

    if mapping.is_empty():
        console.print("[yellow]No trip strategies found[/yellow]")
        return

    table = Table(title=f"Discovered Trip Strategies ({len(mapping.entries)})")
    table.add_column("Key", style="cyan")
    table.add_column("Class", style="bold")
    table.add_column("Module", style="dim")
    for key, cls in sorted(mapping.entries.items()):
        table.add_row(key, cls.__qualname__, cls.__module__)
    console.print(table)

    summary = discovery.last_summary
    if summary is not None and summary.skip_counts:
        skipped = ", ".join(
            f"{reason}={count}" for reason, count in sorted(summary.skip_counts.items())
        )
        console.print(f"[dim]Skipped: {skipped}[/dim]")


def _container(ctx: click.Context) -> ServiceContainer:
    config = load_dispatch_config(ctx.obj.get("config_path") if ctx.obj else None)
    configure_logging(config.log_level)
    return get_default_container(config)


@contextmanager
def _dispatch_errors() -> Iterator[None]:
    """Print dispatch errors and exit with the matching code."""
    try:
        yield
    except RequestValidationError as e:
        console.print(f"[red]Invalid input: {e.message}[/red]")
        raise SystemExit(EXIT_VALIDATION_ERROR) from e
    except DispatchError as e:
        console.print(f"[red]Error ({type(e).__name__}): {e.message}[/red]")
        raise SystemExit(EXIT_DISPATCH_ERROR) from e


if __name__ == "__main__":
    cli()
