#!/usr/bin/env python3

import argparse

from shadowquest.core.config_loader import GameConfigLoader
from shadowquest.core.random_utils import create_rng
from shadowquest.core.renderer import RendererConfig
from shadowquest.renderers.console_renderer import ConsoleRenderer
from shadowquest.game.game import Game


def main():
    parser = argparse.ArgumentParser(description="Shadow Quest - a terminal RPG adventure")
    parser.add_argument("--config", help="Path to an alternative game.yaml")
    parser.add_argument("--seed", type=int, help="Seed for a reproducible session")
    parser.add_argument("--debug", action="store_true", help="Show debug log messages and save the log on exit")
    args = parser.parse_args()

    config = GameConfigLoader(args.config).load_config()
    seed = args.seed if args.seed is not None else config.rng_seed

    renderer = ConsoleRenderer(RendererConfig(show_log_categories=args.debug))
    game = Game(renderer, config=config, rng=create_rng(seed), debug=args.debug)

    try:
        game.run()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user")


if __name__ == "__main__":
    main()
