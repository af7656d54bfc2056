"""CLI for dragonsim."""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.panel import Panel
from rich.progress import BarColumn, Progress, SpinnerColumn, TaskProgressColumn, TextColumn
from rich.table import Table

from . import config
from .curve import Segment, generate_dragon
from .pen import Canvas, Speed, TurtleExecutor, TurtleStatus
from .text import alternate_case, shout
from .unit import Angle, ParseAngleError

_LOGGER = logging.getLogger(__name__)
CONSOLE = Console()

PHRASE_PROMPT = "Enter a phrase:"
ANGLE_PROMPT = 'Now enter an angle. Use ° to indicate degrees and "rad." to indicate radians:'
MAX_ORDER = 20


def parse_speed(ctx: click.Context, param: click.Parameter, value: str) -> Speed:
    return Speed.parse(value)


def make_canvas(backend: str) -> Canvas:
    """Open the rendering surface named by ``backend``."""
    if backend == "plot":
        from .pen.plot import PlotCanvas

        return PlotCanvas()
    from .pen.screen import ScreenCanvas

    return ScreenCanvas()


def prompt_phrase() -> str:
    try:
        return click.prompt(PHRASE_PROMPT, prompt_suffix=" ")
    except click.Abort:
        click.echo(
            f'Could not read user input :(. Using the phrase "{config.DEFAULT_PHRASE}"',
            err=True,
        )
        return config.DEFAULT_PHRASE


def prompt_angle() -> Angle:
    """Prompt until the user enters a parseable angle.

    Falls back to the default angle when input can no longer be read.
    """
    while True:
        try:
            text = click.prompt(ANGLE_PROMPT, prompt_suffix=" ")
        except click.Abort:
            click.echo(
                f"Could not read angle :(. Using the angle {config.DEFAULT_ANGLE}",
                err=True,
            )
            return config.DEFAULT_ANGLE

        try:
            return Angle.parse(text.strip())
        except ParseAngleError as exc:
            click.echo(f"{exc}. Try again.", err=True)


def transform_phrase(phrase: str) -> None:
    click.echo(alternate_case(phrase))
    click.echo(shout(phrase))


def convert_angle(angle: Angle, dms: bool = False) -> None:
    converted = angle.to_radians() if angle.is_degrees else angle.to_degrees()
    click.echo(f"The angle you entered is {converted}.")
    if dms:
        degrees, minutes, seconds = angle.to_dms()
        click.echo(f"That is {degrees}° {minutes}' {seconds}\".")


def draw_dragon(order: int, backend: str, speed: Speed = config.DRAWING_SPEED) -> None:
    click.echo("Ooh, a dragon!")
    canvas = make_canvas(backend)

    executor = TurtleExecutor(canvas, scale=config.DRAGON_STEP)
    executor.configure_window(config.BACKGROUND_COLOR, config.WINDOW_TITLE, config.FULLSCREEN)

    segments = generate_dragon(
        order,
        config.DRAGON_OUTER_TURN,
        config.DRAGON_START_COLOR,
        config.DRAGON_END_COLOR,
    )
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        console=CONSOLE,
        transient=True,
    ) as progress:
        status = executor.draw(segments, speed=speed, progress=progress)

    _LOGGER.info("Dragon of order %d finished at %s", order, status.position)
    CONSOLE.print(summary_panel(order, segments, status))
    canvas.done()


def summary_panel(order: int, segments: list[Segment], status: TurtleStatus) -> Panel:
    """Tabulate the drawn curve and where the turtle stopped."""
    turns = sum(1 for segment in segments if segment.is_turn)

    t = Table.grid(padding=(0, 2))
    t.add_row("[b]Order[/b]: ", str(order))
    t.add_row("[b]Segments[/b]: ", str(len(segments)))
    t.add_row("[b]Strokes[/b]: ", str(len(segments) - turns))
    t.add_row("[b]Turns[/b]: ", str(turns))
    t.add_row("[b]Final Position[/b]: ", repr(status.position))
    t.add_row("[b]Final Heading[/b]: ", str(status.heading))
    t.add_row("[b]Gradient[/b]: ", f"{segments[0].color.to_hex()} → {segments[-1].color.to_hex()}")
    return Panel(t, title="Dragon", padding=(1, 2))


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "-t", "--text", "phrase",
    is_flag=False, flag_value="", default=None, metavar="[PHRASE]",
    help="Alternate the case of a phrase and shout it.",
)
@click.option(
    "-a", "--angle", "angle_text",
    is_flag=False, flag_value="", default=None, metavar="[ANGLE]",
    help="Convert an angle between degrees and radians.",
)
@click.option("--dms", is_flag=True, help="Also print the angle in degrees, minutes and seconds.")
@click.option("-d", "--dragon", is_flag=True, help="Draw a dragon.")
@click.option(
    "--order", type=click.IntRange(0, MAX_ORDER), default=config.DRAGON_ORDER, show_default=True,
    help="Recursion order of the dragon curve.",
)
@click.option(
    "--backend", type=click.Choice(config.BACKENDS), default=config.DEFAULT_BACKEND, show_default=True,
    help="Rendering surface for the dragon.",
)
@click.option(
    "--speed", type=click.Choice([speed.name.lower() for speed in Speed]),
    default=config.DRAWING_SPEED.name.lower(), show_default=True, callback=parse_speed,
    help="Drawing speed of the dragon.",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(
    phrase: str | None,
    angle_text: str | None,
    dms: bool,
    dragon: bool,
    order: int,
    backend: str,
    speed: Speed,
    verbose: bool,
):
    """dragonsim - text tricks, angle conversion and a dragon curve."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if dms and angle_text is None:
        raise click.UsageError("--dms needs an angle, pass it together with -a/--angle.")

    if phrase is None and angle_text is None and not dragon:
        transform_phrase(prompt_phrase())
        return

    if phrase is not None:
        transform_phrase(phrase or prompt_phrase())

    if angle_text is not None:
        if not angle_text:
            angle = prompt_angle()
        else:
            try:
                angle = Angle.parse(angle_text)
            except ParseAngleError as exc:
                click.echo(f"Could not read angle :(. Here's why: {exc}.", err=True)
                angle = prompt_angle()
        convert_angle(angle, dms)

    if dragon:
        draw_dragon(order, backend, speed)


if __name__ == "__main__":
    main()
