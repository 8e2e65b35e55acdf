"""Command line interface for planar."""

import math

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from planar import __version__
from planar.domain.value_objects.point import Point2D
from planar.infrastructure.random.seeded import RandomSourceFactory
from planar.shared.config.settings import RandomSettings, Settings, get_settings
from planar.shared.logging import configure_logging, get_logger

# Negative numbers are positional values, not options.
NUMERIC = {"ignore_unknown_options": True}

app = typer.Typer(
    name="planar",
    help="2D point geometry: scaling, rotation, symmetry, translation and angles",
    add_completion=False,
)
console = Console(force_terminal=True, highlight=False)
logger = get_logger("cli")


def _settings() -> Settings:
    try:
        return get_settings()
    except ValidationError as e:
        console.print(f"[bold red]Invalid configuration:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1)


def _fmt(value: float) -> str:
    return f"{value:.{_settings().display.precision}f}"


def _show(label: str, point: Point2D | None) -> None:
    if point is None:
        console.print(f"[bold green]{label}:[/bold green] None")
        return
    console.print(f"[bold green]{label}:[/bold green] ({_fmt(point.x)}, {_fmt(point.y)})")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
):
    """Configure logging before running a command."""
    settings = _settings()
    log_settings = settings.logging
    if verbose:
        log_settings = log_settings.model_copy(update={"level": "DEBUG"})
    configure_logging(log_settings)
    logger.debug("Loaded settings: %s", settings.as_dict())


@app.command()
def version():
    """Show version information."""
    console.print(Panel(
        Text(f"planar v{__version__}\n2D point geometry", justify="center"),
        title="Version Info",
        border_style="blue"
    ))


@app.command(context_settings=NUMERIC)
def scale(
    x: float = typer.Argument(..., help="X coordinate"),
    y: float = typer.Argument(..., help="Y coordinate"),
    factor: float = typer.Argument(..., help="Scaling factor"),
):
    """Scale a point by a factor."""
    _show("Scaled", Point2D(x, y).scale(factor))


@app.command(context_settings=NUMERIC)
def rotate(
    x: float = typer.Argument(..., help="X coordinate"),
    y: float = typer.Argument(..., help="Y coordinate"),
    cx: float = typer.Argument(..., help="X coordinate of the centre"),
    cy: float = typer.Argument(..., help="Y coordinate of the centre"),
    theta: float = typer.Argument(..., help="Rotation angle (radians unless --degrees)"),
    degrees: bool = typer.Option(False, "--degrees", help="Theta is given in degrees"),
):
    """Rotate a point around a centre."""
    if degrees:
        theta = math.radians(theta)
    _show("Rotated", Point2D(x, y).rotate_point(Point2D(cx, cy), theta))


@app.command(context_settings=NUMERIC)
def angle(
    x: float = typer.Argument(..., help="X coordinate of the centre"),
    y: float = typer.Argument(..., help="Y coordinate of the centre"),
    ox: float = typer.Argument(..., help="X coordinate of the other point"),
    oy: float = typer.Argument(..., help="Y coordinate of the other point"),
):
    """Compute the angle of a point seen from a centre."""
    value = Point2D(x, y).compute_angle(Point2D(ox, oy))
    console.print(
        f"[bold green]Angle:[/bold green] {_fmt(value)} rad ({_fmt(math.degrees(value))} deg)"
    )


@app.command(context_settings=NUMERIC)
def middle(
    x: float = typer.Argument(..., help="X coordinate"),
    y: float = typer.Argument(..., help="Y coordinate"),
    ox: float = typer.Argument(..., help="X coordinate of the other point"),
    oy: float = typer.Argument(..., help="Y coordinate of the other point"),
):
    """Compute the middle of two points."""
    _show("Middle", Point2D(x, y).middle_point(Point2D(ox, oy)))


@app.command(context_settings=NUMERIC)
def hsym(
    x: float = typer.Argument(..., help="X coordinate"),
    y: float = typer.Argument(..., help="Y coordinate"),
    oy: float = typer.Argument(..., help="Y position of the horizontal axis"),
):
    """Reflect a point across a horizontal axis."""
    _show("Reflected", Point2D(x, y).horizontal_symmetry(Point2D(0.0, oy)))


@app.command(context_settings=NUMERIC)
def csym(
    x: float = typer.Argument(..., help="X coordinate"),
    y: float = typer.Argument(..., help="Y coordinate"),
    cx: float = typer.Argument(..., help="X coordinate of the centre"),
    cy: float = typer.Argument(..., help="Y coordinate of the centre"),
):
    """Get the point symmetric through a centre."""
    _show("Symmetric", Point2D(x, y).central_symmetry(Point2D(cx, cy)))


@app.command(context_settings=NUMERIC)
def translate(
    x: float = typer.Argument(..., help="X coordinate"),
    y: float = typer.Argument(..., help="Y coordinate"),
    tx: float = typer.Argument(..., help="X translation"),
    ty: float = typer.Argument(..., help="Y translation"),
):
    """Translate a point."""
    point = Point2D(x, y)
    point.translate(tx, ty)
    _show("Translated", point)


@app.command()
def random(
    seed: int = typer.Option(None, "--seed", help="Seed for reproducible output"),
):
    """Create a point from two random integer sources."""
    random_settings = _settings().random
    if seed is not None:
        random_settings = RandomSettings(seed=seed)
    source_x, source_y = RandomSourceFactory.create_pair(random_settings)

    point = Point2D()
    point.set_point(source_x, source_y)
    _show("Random", point)


@app.command()
def config():
    """Show the effective configuration."""
    table = Table(title="Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    for key, value in _settings().as_dict().items():
        table.add_row(key, str(value))
    console.print(table)


if __name__ == "__main__":
    app()
