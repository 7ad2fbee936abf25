import argparse
import copy
import logging

from montyhall import GameSeries

config = {
    # Number of games played for each door count and each strategy
    'games': 100000,
    # The original problem has 3 doors, the others are generalizations
    'door_counts': [3, 4, 30, 100, 200],
    # Seeds for the host's and the candidate's generators, None for fresh entropy
    'seed': None,
    'player_seed': None,
    'verbose': 0,
}


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Estimate the odds of staying vs switching in the N-door Monty Hall game")
    parser.add_argument("--games", type=int, default=config['games'],
                        help="Number of games per door count and strategy")
    parser.add_argument("--doors", type=int, nargs='+', default=config['door_counts'],
                        help="Door counts to simulate")
    parser.add_argument("--seed", type=int, default=config['seed'],
                        help="Seed for the host's random generator")
    parser.add_argument("--player-seed", type=int, default=config['player_seed'],
                        help="Seed for the candidate's random generator")
    parser.add_argument("-v", "--verbose", action="count", default=config['verbose'],
                        help="-v for batch summaries, -vv for every game")
    return parser.parse_args(argv)


def build_config(args):
    curr_config = copy.deepcopy(config)
    curr_config['games'] = args.games
    curr_config['door_counts'] = list(args.doors)
    curr_config['seed'] = args.seed
    curr_config['player_seed'] = args.player_seed
    curr_config['verbose'] = args.verbose
    return curr_config


def run(argv=None):
    """Parse the command line, simulate, and return {n_doors: (stay, switch)}"""
    args = parse_args(argv)
    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(level=level, format='%(asctime)s - %(levelname)s - %(message)s')

    simulator = GameSeries(build_config(args))
    simulator.header()
    return simulator.simulate()


def main(argv=None):
    # Console script entry point, its return value becomes the exit status
    run(argv)


if __name__ == "__main__":
    main()
