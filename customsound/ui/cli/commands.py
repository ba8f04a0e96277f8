import logging
import random
from collections import Counter
from pathlib import Path
from typing import List, Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from customsound.config.loader import (
    get_template_config,
    load,
    read_groups,
    validate_groups,
)
from customsound.config.settings import get_settings
from customsound.core.exceptions import ConfigError
from customsound.host.headless import HeadlessCharacter, HeadlessHost
from customsound.mod import CustomSoundMod
from customsound.models.sound import SoundGroup
from customsound.selection.selector import select_weighted
from customsound.utils.logging import get_logger, setup_logging
from customsound.utils.paths import sounds_dir_for

# We use 'click' to create the command line interface and 'rich' for output.
# None of this runs inside the game: these are tools for writing and checking
# a config.json before dropping it next to the mod.

console = Console()

dir_option = click.option(
    "--dir",
    "-d",
    "base_dir",
    default=None,
    help="Mod install directory (default: the detected install directory)",
)


def _base_dir(base_dir: Optional[str]) -> str:
    return base_dir if base_dir is not None else get_settings().base_dir


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def cli(verbose: bool):
    """
    CustomSound developer tools.

    Create, validate and try out the config.json that tells the mod which
    sounds and captions to use when the noise key is pressed.
    """
    setup_logging("DEBUG" if verbose else "WARNING")


@cli.command()
def paths():
    """
    Show where the mod looks for its files.
    """
    settings = get_settings()
    table = Table(show_header=False)
    table.add_column("What", style="bold")
    table.add_column("Path")
    table.add_row("Install directory", settings.base_dir or "[red]unknown[/red]")
    table.add_row("Sounds directory", settings.sounds_dir or "[red]unknown[/red]")
    table.add_row("Config file", str(Path(settings.base_dir, settings.config_filename)) if settings.base_dir else "-")
    table.add_row("Log file", str(Path(settings.base_dir, f"{settings.log_name}.log")) if settings.base_dir else "-")
    console.print(table)


# =============================================================================
# CONFIG COMMAND GROUP
# =============================================================================


@cli.group()
def config():
    """
    Manage config.json.

    Examples:
        customsound config init --dir ./mymod
        customsound config validate --dir ./mymod --verbose
    """
    pass


@config.command(name="init")
@dir_option
@click.option("--force", "-f", is_flag=True, help="Overwrite existing file without asking")
def config_init(base_dir: Optional[str], force: bool):
    """
    Write a starter config.json and create the sounds folder.
    """
    settings = get_settings()
    base = Path(_base_dir(base_dir))
    output_path = base / settings.config_filename
    sounds_path = base / settings.sounds_subdir

    if output_path.exists() and not force:
        console.print(f"[yellow]File already exists:[/yellow] {output_path}")
        console.print("Use [cyan]--force[/cyan] to overwrite.")
        raise SystemExit(1)

    try:
        sounds_path.mkdir(parents=True, exist_ok=True)
        output_path.write_text(get_template_config(), encoding="utf-8")
    except OSError as e:
        console.print(f"[bold red]Error:[/bold red] Failed to create configuration file: {e}")
        raise SystemExit(1)

    console.print(Panel(
        f"[bold green]✓ Created configuration file:[/bold green] {output_path}\n\n"
        "[dim]Next steps:[/dim]\n"
        f"  1. Put your sound files in [cyan]{sounds_path}[/cyan]\n"
        f"  2. Edit [cyan]{output_path}[/cyan] to list them\n"
        f"  3. Run [cyan]customsound config validate --dir {base}[/cyan]",
        title="Configuration Created",
        border_style="green"
    ))


@config.command(name="validate")
@dir_option
@click.option("--verbose", "-v", is_flag=True, help="List every sound entry")
def config_validate(base_dir: Optional[str], verbose: bool):
    """
    Check config.json and every sound file it mentions.

    Exit code 0 when the file parses, 1 otherwise. Missing sound files are
    reported but are not an error (the mod skips them).
    """
    settings = get_settings()
    base = _base_dir(base_dir)
    config_path = Path(base, settings.config_filename)

    try:
        raw_groups = read_groups(config_path)
    except ConfigError as e:
        console.print(Panel(
            f"[bold red]✗ Configuration validation failed[/bold red]\n\n{e}",
            title="Validation Error",
            border_style="red"
        ))
        raise SystemExit(1)

    groups = validate_groups(raw_groups, sounds_dir_for(base, settings.sounds_subdir))
    _print_groups(groups)

    if verbose:
        for raw, group in zip(raw_groups, groups):
            console.print(f"\n[bold]{group.display_name}[/bold]")
            for entry, resolved in zip(raw.sounds, group.sounds):
                mark = "[green]✓[/green]" if resolved else "[red]✗[/red]"
                console.print(f"  {mark} {entry}")

    missing = sum(len(g.sounds) - g.valid_sound_count for g in groups)
    style = "yellow" if missing else "green"
    console.print(f"\n[{style}]{len(groups)} groups, {missing} missing sound files[/{style}]")


def _print_groups(groups: List[SoundGroup]) -> None:
    total = sum(g.weight for g in groups)
    table = Table(title="Sound Groups", show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right")
    table.add_column("Name", style="bold")
    table.add_column("Sounds", justify="right")
    table.add_column("Texts", justify="right")
    table.add_column("Type")
    table.add_column("Radius", justify="right")
    table.add_column("Weight", justify="right")
    table.add_column("Chance", justify="right")

    for index, g in enumerate(groups):
        chance = f"{g.weight / total:.1%}" if total > 0 else "-"
        table.add_row(
            str(index),
            g.display_name,
            f"{g.valid_sound_count}/{len(g.sounds)}",
            str(len(g.texts)),
            g.sound_type.value,
            f"{g.radius:g}",
            str(g.weight),
            chance,
        )
    console.print(table)


# =============================================================================
# TRY-OUT COMMANDS
# =============================================================================


@cli.command()
@dir_option
@click.option("--count", "-n", default=1000, help="Number of draws")
@click.option("--seed", type=int, default=None, help="Random seed for repeatable runs")
def simulate(base_dir: Optional[str], count: int, seed: Optional[int]):
    """
    Draw many times and compare how often each group came up with its weight.
    """
    settings = get_settings()
    base = _base_dir(base_dir)
    groups = load(
        base,
        sounds_dir_for(base, settings.sounds_subdir),
        config_filename=settings.config_filename,
        drop_invalid_groups=settings.drop_invalid_groups,
    )
    if not groups:
        console.print("[yellow]No sound groups loaded.[/yellow] Run with --verbose to see why.")
        raise SystemExit(1)

    rng = random.Random(seed)
    index_of = {id(g): i for i, g in enumerate(groups)}
    counts: Counter = Counter()
    for _ in range(count):
        group = select_weighted(groups, rng)
        counts[index_of[id(group)] if group is not None else None] += 1

    total = sum(g.weight for g in groups)
    table = Table(title=f"{count} draws", show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right")
    table.add_column("Name", style="bold")
    table.add_column("Weight", justify="right")
    table.add_column("Expected", justify="right")
    table.add_column("Observed", justify="right")
    for index, g in enumerate(groups):
        expected = g.weight / total if total > 0 else 0.0
        table.add_row(
            str(index),
            g.display_name,
            str(g.weight),
            f"{expected:.1%}",
            f"{counts[index] / count:.1%}" if count else "-",
        )
    console.print(table)
    if counts[None]:
        console.print(f"[yellow]{counts[None]} draws selected nothing (all weights are 0)[/yellow]")


@cli.command()
@dir_option
@click.option("--count", "-n", default=5, help="Number of key presses")
@click.option("--seed", type=int, default=None, help="Random seed for repeatable runs")
def trigger(base_dir: Optional[str], count: int, seed: Optional[int]):
    """
    Run the whole mod against a headless game and press the key a few times.
    """
    settings = get_settings(
        install_dir=_base_dir(base_dir),
        log_level=logging.getLevelName(get_logger().level),
        log_to_file=False,
        dump_config=False,
    )
    host = HeadlessHost(character=HeadlessCharacter())
    mod = CustomSoundMod(host, settings, rng=random.Random(seed))
    mod.on_load()
    mod.on_enable()

    if not mod.is_active:
        console.print("[yellow]The mod is not active (no sound groups).[/yellow]")
        raise SystemExit(1)

    table = Table(title="Key presses", show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right")
    table.add_column("Group")
    table.add_column("Sound")
    table.add_column("Caption")
    table.add_column("AI noise")

    control = host.input.find_action(settings.trigger_action).control
    for press in range(count):
        before = (len(host.played), len(host.captions), len(host.noises))
        host.input.press(control)
        played = host.played[before[0]:]
        captions = host.captions[before[1]:]
        noises = host.noises[before[2]:]

        caption = "-"
        if captions:
            caption = "[dim](hide)[/dim]" if captions[0].is_hide else captions[0].text
        noise = f"{noises[0].sound_type.value} r={noises[0].radius:g}" if noises else "-"
        selected = mod.coordinator.last_selected
        table.add_row(
            str(press + 1),
            (selected.name or "unnamed") if selected else "-",
            Path(played[0]).name if played else "-",
            caption,
            noise,
        )

    console.print(table)
    mod.on_disable()
