"""tilemaze CLI entry point.

Generates a maze tilemap and prints it as text or JSON. Settings come from
flags, ``TILEMAZE_*`` environment variables, or a .env file; flags take
precedence over the environment.

Run `python run.py --help` for details.
"""

import argparse
import json
import sys
from textwrap import dedent

from colorama import Fore, Style, just_fix_windows_console
from dotenv import load_dotenv

from tilemaze import __version__
from tilemaze.logging_utils import log
from tilemaze.maze import PRESETS, EmptyRoomList, Maze, MazeConfig, MazeError
from tilemaze.maze.patterns import get_preset, parse_pattern
from tilemaze.render import TextRenderer

just_fix_windows_console()

COMMANDS = ("generate", "presets")


def _with_default_command(argv: list[str]) -> list[str]:
    """Insert ``generate`` when no subcommand follows the global options."""
    argv = list(argv)
    i = 0
    while i < len(argv):
        if argv[i] == "--env-file":
            i += 2
        elif argv[i].startswith("--env-file="):
            i += 1
        else:
            break
    if i >= len(argv) or argv[i] not in COMMANDS + ("-h", "--help", "--version"):
        argv.insert(i, "generate")
    return argv


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    tilemaze - procedural maze tilemaps

    Tiles a category pattern across a grid, carves it with randomized Prim's
    algorithm and prints the resulting wall/open tilemap.
    """

    epilog = dedent(
        """
        Environment variables:
          TILEMAZE_WIDTH, TILEMAZE_HEIGHT   Grid size before widening (default: 33 x 26)
          TILEMAZE_SEED                     Seed for reproducible mazes (default: random)
          TILEMAZE_PRESET                   Named pattern (see `presets`)
          TILEMAZE_LINE_RESET               Restart the pattern on every row (0/1)
          TILEMAZE_WIDEN                    Double tiles to 2x2 blocks (default: 1)
          TILEMAZE_STRICT                   Fail when the pattern yields no rooms (0/1)
          TILEMAZE_LOG_LEVEL                debug | info | warn | error

        Examples:
          # Default maze, widened, random seed
          python run.py

          # Reproducible 41x31 maze without widening
          python run.py generate --width 41 --height 31 --seed 7 --no-widen

          # Custom row templates, JSON output
          python run.py generate --pattern "2,1;1,0" --format json
        """
    )

    parser = argparse.ArgumentParser(
        prog="tilemaze",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before reading TILEMAZE_* variables",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"tilemaze {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    gen = subparsers.add_parser(
        "generate",
        help="Generate a maze and print it",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Generate a maze tilemap",
    )
    gen.add_argument("--width", type=int, default=None, help="Grid width before widening")
    gen.add_argument("--height", type=int, default=None, help="Grid height before widening")
    gen.add_argument("--seed", type=int, default=None, help="Random seed (default: env TILEMAZE_SEED or random)")
    source = gen.add_mutually_exclusive_group()
    source.add_argument("--preset", choices=sorted(PRESETS), default=None, help="Named pattern")
    source.add_argument(
        "--pattern",
        default=None,
        help='Comma separated categories; ";" separates row templates (e.g. "2,1;1,0")',
    )
    gen.add_argument(
        "--line-reset",
        dest="line_reset",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Restart the pattern on each row (default: on for row templates)",
    )
    gen.add_argument("--no-widen", dest="no_widen", action="store_true", help="Skip 2x2 widening")
    gen.add_argument("--strict", action="store_true", help="Fail when no interior rooms exist")
    gen.add_argument("--format", choices=("text", "json"), default="text", help="Output format")
    gen.add_argument("--color", action="store_true", help="Colour wall tiles (terminals only)")
    gen.add_argument("--stats", action="store_true", help="Print generation metrics")
    gen.add_argument("--wall-char", default="#", help="Glyph for wall tiles in text output")
    gen.add_argument("--open-char", default=" ", help="Glyph for open tiles in text output")
    gen.set_defaults(command="generate")

    presets = subparsers.add_parser(
        "presets",
        help="List named patterns",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    presets.set_defaults(command="presets")

    return parser.parse_args(_with_default_command(argv))


def build_config(args: argparse.Namespace) -> MazeConfig:
    """Environment first, then explicit flags on top."""
    overrides = {
        "width": args.width,
        "height": args.height,
        "seed": args.seed,
        "strict": True if args.strict else None,
        "widen": False if args.no_widen else None,
    }
    if args.preset:
        pattern, line_reset = get_preset(args.preset)
        overrides["pattern"] = pattern
        overrides["line_reset"] = line_reset
    elif args.pattern:
        pattern = parse_pattern(args.pattern)
        overrides["pattern"] = pattern
        overrides["line_reset"] = isinstance(pattern[0], list)
    if args.line_reset is not None:
        overrides["line_reset"] = args.line_reset
    return MazeConfig.from_env(**overrides)


def _print_stats(maze: Maze, color: bool) -> None:
    def label(text: str) -> str:
        return f"{Fore.YELLOW}{text}{Style.RESET_ALL}" if color else text

    def value(val) -> str:
        return f"{Fore.GREEN}{val}{Style.RESET_ALL}" if color else str(val)

    divider = (Fore.MAGENTA + "=" * 40 + Style.RESET_ALL) if color else "=" * 40
    lines = [divider, f"  {label('Seed:'):16} {value(maze.seed)}", f"  {label('Size:'):16} {value(f'{maze.width}x{maze.height}')}"]
    for key in ("walls", "rooms", "rooms_visited", "rooms_isolated", "walls_opened", "runtime_ms"):
        if key in maze.metrics:
            lines.append(f"  {label(key + ':'):16} {value(maze.metrics[key])}")
    lines.append(divider)
    print("\n".join(lines))


def _cmd_presets() -> int:
    for name in sorted(PRESETS):
        pattern, line_reset = PRESETS[name]
        print(f"{name:10} line_reset={'yes' if line_reset else 'no':3}  {json.dumps(pattern)}")
    return 0


def _cmd_generate(args: argparse.Namespace) -> int:
    try:
        config = build_config(args)
        maze = Maze(config)
    except EmptyRoomList as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 1
    except MazeError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 2

    if args.format == "json":
        data = maze.to_dict()
        if args.stats:
            data["metrics"] = maze.metrics
        print(json.dumps(data, separators=(",", ":")))
        return 0

    color = args.color and sys.stdout.isatty()
    maze.render(TextRenderer(wall_glyph=args.wall_char, open_glyph=args.open_char, color=color, stream=sys.stdout))
    if args.stats:
        _print_stats(maze, color)
    return 0


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file, override=True)
    else:
        # Default .env is optional; missing file is not an error
        load_dotenv()

    mode = getattr(args, "command", None) or "generate"
    log.info(event="startup", mode=mode, version=__version__)
    if mode == "presets":
        return _cmd_presets()
    return _cmd_generate(args)


def cli() -> None:  # pragma: no cover
    sys.exit(main(sys.argv[1:]))


if __name__ == "__main__":  # pragma: no cover
    cli()
