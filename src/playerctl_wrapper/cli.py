"""
playerctl-wrapper CLI - Entry point

Thin command-line front end over the library operations. Each subcommand
is a single playerctl round trip.
"""

import argparse
import math
import sys
from typing import Optional

from rich.table import Table

from playerctl_wrapper.core.config import Config, get_log_file_path, load_config
from playerctl_wrapper.core.console import get_console, get_error_console
from playerctl_wrapper.core.output import setup_loguru
from playerctl_wrapper.domain import playback
from playerctl_wrapper.domain.playback import (
    PlayerctlError,
    PlayerctlIOError,
    PlayerMetadata,
    check_playerctl_available,
)

# Subcommand -> no-argument control operation
CONTROL_COMMANDS = {
    "play": playback.play,
    "pause": playback.pause,
    "play-pause": playback.play_pause,
    "stop": playback.stop,
    "next": playback.next_track,
    "previous": playback.previous_track,
}


def format_microseconds(value: Optional[int]) -> str:
    """Format a microsecond count as M:SS, or an empty string for None."""
    if value is None:
        return ""
    total_seconds = value // 1_000_000
    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes}:{seconds:02d}"


def build_metadata_table(players: dict[str, PlayerMetadata]) -> Table:
    """Build a Rich table with one row per player."""
    table = Table(title="Metadata")
    table.add_column("Player", style="cyan")
    table.add_column("Title")
    table.add_column("Artist")
    table.add_column("Album")
    table.add_column("Length", justify="right")
    table.add_column("URL", overflow="fold")

    for name, metadata in players.items():
        table.add_row(
            name,
            metadata.title or "",
            metadata.artist or "",
            metadata.album or "",
            format_microseconds(metadata.length),
            metadata.url or "",
        )
    return table


def build_position_table(positions: dict[str, int]) -> Table:
    """Build a Rich table of player positions."""
    table = Table(title="Position")
    table.add_column("Player", style="cyan")
    table.add_column("Position", justify="right")
    table.add_column("Microseconds", justify="right")

    for name, position in positions.items():
        table.add_row(name, format_microseconds(position), str(position))
    return table


def positive_seconds(text: str) -> float:
    """argparse type for a finite, positive number of seconds."""
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {text!r}") from None
    if not math.isfinite(value) or value <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive number, got {text!r}")
    return value


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="playerctl-wrapper",
        description="Control MPRIS media players through playerctl",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--executable",
        help="playerctl binary to run (overrides config)",
    )
    parser.add_argument(
        "--timeout",
        type=positive_seconds,
        help="Seconds to wait for playerctl (overrides config)",
    )

    subparsers = parser.add_subparsers(dest="subcommand", help="Available commands")
    subparsers.required = True

    # Control commands
    subparsers.add_parser("play", help="Command the player to play")
    subparsers.add_parser("pause", help="Command the player to pause")
    subparsers.add_parser("play-pause", help="Toggle between play/pause")
    subparsers.add_parser("stop", help="Command the player to stop")
    subparsers.add_parser("next", help="Skip to the next track")
    subparsers.add_parser("previous", help="Skip to the previous track")

    seek_parser = subparsers.add_parser(
        "seek", help="Seek forward/backward OFFSET seconds"
    )
    seek_parser.add_argument("offset", type=float, help="Seconds (negative rewinds)")

    volume_parser = subparsers.add_parser(
        "volume", help="Raise/lower the volume by DELTA percent"
    )
    volume_parser.add_argument("delta", type=float, help="Percent (negative lowers)")

    # Queries
    subparsers.add_parser("status", help="Show the play status")
    subparsers.add_parser("position", help="Show every player's position")
    metadata_parser = subparsers.add_parser("metadata", help="Show track metadata")
    metadata_parser.add_argument(
        "--all",
        action="store_true",
        help="Show every player instead of only the active one",
    )
    metadata_parser.add_argument(
        "--raw",
        action="store_true",
        help="Print every key/value playerctl reported",
    )

    return parser


def run_subcommand(args: argparse.Namespace, config: Config) -> int:
    """Run the parsed subcommand.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    options = {
        "executable": args.executable or config.playerctl.executable,
        "timeout": args.timeout if args.timeout is not None else config.playerctl.timeout,
    }
    console = get_console()

    try:
        if args.subcommand in CONTROL_COMMANDS:
            CONTROL_COMMANDS[args.subcommand](**options)

        elif args.subcommand == "seek":
            playback.seek(args.offset, **options)

        elif args.subcommand == "volume":
            playback.set_volume(args.delta, **options)

        elif args.subcommand == "status":
            console.print(playback.get_status(**options).value)

        elif args.subcommand == "position":
            console.print(build_position_table(playback.get_position(**options)))

        elif args.subcommand == "metadata":
            if args.all:
                players = playback.get_metadata(**options)
            else:
                players = {}
                current = playback.get_current_metadata(**options)
                if current is not None:
                    name, metadata = current
                    players[name] = metadata

            if args.raw:
                for name, metadata in players.items():
                    for key, value in metadata.raw.items():
                        console.print(f"{name} {key} {value}", markup=False)
            else:
                console.print(build_metadata_table(players))

        return 0

    except PlayerctlIOError as e:
        get_error_console().print(f"Error: {e}", markup=False)
        if not check_playerctl_available(options["executable"]):
            get_error_console().print(
                f"{options['executable']} is not installed or not on PATH",
                markup=False,
            )
        return 1
    except (PlayerctlError, ValueError) as e:
        get_error_console().print(f"Error: {e}", markup=False)
        return 1


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point for the playerctl-wrapper command."""
    args = create_parser().parse_args(argv)

    config = load_config()
    setup_loguru(
        get_log_file_path(config),
        level=config.logging.level,
        console_output=config.logging.console_output,
    )

    sys.exit(run_subcommand(args, config))


if __name__ == "__main__":
    main()
