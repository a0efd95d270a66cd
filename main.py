import argparse
import sys

from config import GameConfig
from controls import ControlScheme
from game import Game
from renderer import TerminalRenderer
from screens import ScreenNotFoundError, load_screens
from simulation import Simulation
from terminal import DirectInput


def build_parser():
    parser = argparse.ArgumentParser(
        prog="robots",
        description="ASCII robots: escape the robots by making them crash into each other.",
    )
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="print player and robot coordinates every turn")
    scheme = parser.add_mutually_exclusive_group()
    scheme.add_argument("--classic", dest="scheme", action="store_const", const=ControlScheme.CLASSIC,
                        help="numeric keypad controls (default)")
    scheme.add_argument("--alt", dest="scheme", action="store_const", const=ControlScheme.ALT,
                        help="letter controls (hjklyubn)")
    parser.add_argument("--seed", type=int, default=None, help=argparse.SUPPRESS)
    parser.set_defaults(scheme=ControlScheme.CLASSIC)
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        screens = load_screens()
    except ScreenNotFoundError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    config = GameConfig(verbose=args.verbose, control_scheme=args.scheme, seed=args.seed)
    simulation = Simulation(config)
    renderer = TerminalRenderer(verbose=config.verbose)

    try:
        with DirectInput() as keyboard:
            return Game(simulation, keyboard, renderer, screens).run()
    except KeyboardInterrupt:
        print()
        return 130


if __name__ == "__main__":
    sys.exit(main())
