from __future__ import annotations

import argparse

from runcat.ui.cli import commands


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="RunCat Endless")
    subparsers = parser.add_subparsers(dest="command", required=True)

    common_parent = argparse.ArgumentParser(add_help=False)
    common_parent.add_argument("--seed", type=int, default=None)

    sub = subparsers.add_parser("play", parents=[common_parent], help="Open the game window")
    sub.add_argument("--autoplay", action="store_true", default=None)
    sub.add_argument("--theme", choices=["light", "dark"], default=None)
    sub.set_defaults(func=commands.cmd_play)

    sub = subparsers.add_parser("simulate", parents=[common_parent], help="Run headless auto-play sessions")
    sub.add_argument("--sims", type=int, default=None)
    sub.add_argument("--max-ticks", type=int, default=None)
    sub.add_argument("--workers", type=int, default=None)
    sub.set_defaults(func=commands.cmd_simulate)

    sub = subparsers.add_parser("replay", parents=[common_parent], help="Watch a simulated auto-play run")
    sub.add_argument("--run-seed", type=int, default=None, help="seed of the first run to show")
    sub.add_argument("--theme", choices=["light", "dark"], default=None)
    sub.set_defaults(func=commands.cmd_replay)

    sub = subparsers.add_parser("report", help="Print the saved simulation summary")
    sub.set_defaults(func=commands.cmd_report)

    sub = subparsers.add_parser("best", help="Show or reset the stored best score")
    sub.add_argument("--reset", action="store_true")
    sub.set_defaults(func=commands.cmd_best)

    sub = subparsers.add_parser("doctor", help="Check environment/dependencies")
    sub.set_defaults(func=commands.cmd_doctor)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
