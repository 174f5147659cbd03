"""CLI entry point for clocktime."""

import logging
import sys

import click

from clocktime import __version__


def _load_config():
    """Load the user config. Returns (config, config_path)."""
    from clocktime.config import ClocktimeConfig
    from clocktime.paths import get_config_dir, get_config_path

    config_path = get_config_path(get_config_dir())
    try:
        return ClocktimeConfig.load(config_path), config_path
    except ValueError as e:
        raise click.ClickException(f"Bad config in {config_path}: {e}")


def _parse_or_fail(raw, cfg):
    from clocktime.clock import ClockTime

    t = ClockTime(raw, now=cfg.now_source())
    if not t.is_valid():
        raise click.ClickException(f"Invalid time: {raw!r}")
    return t


@click.group()
@click.version_option(version=__version__, prog_name="clocktime")
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr.")
def main(verbose):
    """Parse, format and shift 12-hour clock times."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@main.command()
@click.argument("time")
def parse(time):
    """Show the hour, minute and period parsed from TIME."""
    from clocktime.clock import ClockTime

    cfg, _ = _load_config()
    t = ClockTime(time, now=cfg.now_source())
    valid = t.is_valid()
    click.echo(f"{'hours:':<9}{t.hours if valid else '-'}")
    click.echo(f"{'minutes:':<9}{t.minutes if valid else '-'}")
    click.echo(f"{'period:':<9}{t.period.name.lower()}")
    click.echo(f"{'valid:':<9}{'yes' if valid else 'no'}")
    if not valid:
        sys.exit(1)


@main.command()
@click.argument("time")
def validate(time):
    """Exit 0 if TIME is an acceptable time literal, 1 otherwise."""
    from clocktime.grammar import is_valid

    if is_valid(time):
        click.echo("valid")
        return
    click.echo("invalid")
    sys.exit(1)


@main.command(name="format")
@click.argument("time")
@click.option("--format", "-f", "fmt", default=None,
              help="Format pattern, e.g. 'hh:mm A' (default: display.time_format).")
def format_cmd(time, fmt):
    """Render TIME under a format pattern.

    \b
    Examples:
      clocktime format 755               7:55
      clocktime format 7p -f 'hh:mm A'   07:00 PM
      clocktime format 7.5 -f h.         invalid time
    """
    from clocktime.clock import ClockTime

    cfg, _ = _load_config()
    result = ClockTime(time, now=cfg.now_source()).render(fmt, default=cfg.display.time_format)
    if not result.ok:
        raise click.ClickException(str(result))
    click.echo(result.text)


@main.command()
@click.argument("time")
@click.option("--hours", "-H", type=int, default=0, help="Hours to add (may be negative).")
@click.option("--minutes", "-m", type=int, default=0, help="Minutes to add (may be negative).")
@click.option("--format", "-f", "fmt", default=None, help="Format pattern for the result.")
def shift(time, hours, minutes, fmt):
    """Shift TIME by an offset within the same day."""
    cfg, _ = _load_config()
    t = _parse_or_fail(time, cfg)
    if not t.shift(hours, minutes):
        raise click.ClickException(f"Shifting {t} by {hours}h {minutes}m leaves the day")
    result = t.render(fmt, default=cfg.display.time_format)
    if not result.ok:
        raise click.ClickException(str(result))
    click.echo(result.text)


@main.command(name="next")
@click.argument("time")
def next_occurrence(time):
    """Print the next date and time at which TIME occurs."""
    cfg, _ = _load_config()
    t = _parse_or_fail(time, cfg)
    click.echo(t.next_occurrence().isoformat(sep=" ", timespec="minutes"))


@main.command()
@click.argument("key", required=False)
@click.argument("value", required=False)
@click.option("--list", "list_all", is_flag=True, help="Show all configuration values.")
def config(key, value, list_all):
    """View or set configuration."""
    cfg, config_path = _load_config()

    if list_all or (key is None and value is None):
        for section_name, section_dict in cfg._to_dict().items():
            for k, v in section_dict.items():
                click.echo(f"{section_name}.{k} = {v!r}")
        return

    if value is None:
        try:
            click.echo(cfg.get(key))
        except KeyError as e:
            raise click.ClickException(str(e))
        return

    try:
        cfg.set(key, value)
    except (KeyError, ValueError) as e:
        raise click.ClickException(str(e))
    cfg.save(config_path)
    click.echo(f"Set {key} = {cfg.get(key)!r}")
