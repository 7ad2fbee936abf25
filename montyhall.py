import copy
import logging
from collections import defaultdict
from enum import Enum, auto

import numpy as np

logger = logging.getLogger(__name__)

MIN_DOORS = 3
STRATEGIES = ('stay', 'switch')


def is_integer(value):
    """Plain or numpy integers, but not booleans"""
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


class MontyHallError(Exception):
    """Base class for everything the simulation raises on purpose"""


class InvalidConfiguration(MontyHallError, ValueError):
    """Bad door count, bad choice or bad simulation settings; the caller can fix it"""


class InternalInvariantViolation(MontyHallError, AssertionError):
    """The host's reveal left the board in an impossible state, the simulation is unsound"""


class Phase(Enum):
    """Progress of a single game. Purely informational, nothing blocks on it."""

    CREATED = auto()
    GOATS_REVEALED = auto()
    RESOLVED = auto()


class Game:
    def __init__(self, n_doors, first_choice, rng=None):
        """Set up one round of the (generalized) Monty Hall game
        n_doors (int): number of doors, one car and n_doors - 1 goats
        first_choice (int): the candidate's initial pick, in [0, n_doors)
        rng: the host's random number generator, the numpy default is quite good (PCG64)
        """
        if not is_integer(n_doors) or n_doors < MIN_DOORS:
            raise InvalidConfiguration(
                f"The game makes no sense below {MIN_DOORS} doors (got {n_doors!r})")
        if not is_integer(first_choice) or not 0 <= first_choice < n_doors:
            raise InvalidConfiguration(
                f"Invalid 1st choice {first_choice!r}, doors are numbered from 0 until {n_doors}")

        self.rng = rng if rng is not None else np.random.default_rng()
        self.n_doors = int(n_doors)
        self.first_choice = int(first_choice)
        self.phase = Phase.CREATED

        # Drawn exactly once, the host knows it but the candidate never does
        self._winning_door = int(self.rng.integers(self.n_doors))
        self._revealed = None

    def __repr__(self):
        return (f"Game(n_doors={self.n_doors}, first_choice={self.first_choice}, "
                f"phase={self.phase.name})")

    def reveal_goats(self):
        """Monty opens every goat door he can without touching the winning door or
        the candidate's first choice, so exactly two doors stay closed.

        If the candidate already holds the car, Monty leaves one random goat door
        closed; otherwise he is forced to leave the winning door closed.
        The pick is made once and cached, repeated calls return the same set.
        """
        if self._revealed is not None:
            return self._revealed

        options = [idx for idx in range(self.n_doors) if idx != self.first_choice]
        if self.first_choice == self._winning_door:
            # Every other door hides a goat, keep a random one closed
            left_closed = options[self.rng.integers(len(options))]
        else:
            left_closed = self._winning_door

        self._revealed = frozenset(idx for idx in options if idx != left_closed)
        if self.phase is Phase.CREATED:
            self.phase = Phase.GOATS_REVEALED
        logger.debug("%r: Monty leaves door %d closed", self, left_closed)
        return self._revealed

    def remaining_door(self):
        """The only door besides the first choice that Monty left closed"""
        revealed = self.reveal_goats()
        remaining = [idx for idx in range(self.n_doors)
                     if idx != self.first_choice and idx not in revealed]
        if len(remaining) != 1:
            raise InternalInvariantViolation(
                f"Exactly one door should remain closed besides #{self.first_choice}, "
                f"found {remaining}")
        return remaining[0]

    def resolve(self, second_choice=None):
        """Open the candidate's final door
        second_choice: None to stay with the first choice, or the remaining door to switch
        Returns True when the final door hides the car.
        """
        if second_choice is None:
            final_choice = self.first_choice
        else:
            remaining = self.remaining_door()
            if second_choice != remaining:
                raise InvalidConfiguration(
                    f"Invalid 2nd choice: {second_choice!r} while there is only door "
                    f"#{remaining} remaining")
            final_choice = remaining

        self.phase = Phase.RESOLVED
        return final_choice == self._winning_door

    def play(self, strategy='switch'):
        """A standard game is:
            1) the first choice, already made at construction
            2) Monty reveals the goats
            3) optionally switch to the remaining door
            """
        if strategy == 'stay':
            return self.resolve()
        if strategy == 'switch':
            return self.resolve(self.remaining_door())
        raise InvalidConfiguration(f"Player strategy not supported {strategy!r}")


class GameSeries:
    def __init__(self, config):
        self.config = copy.deepcopy(config)
        self.validate()
        # Host and candidate are two independent actors, each gets its own generator
        self.rng = np.random.default_rng(self.config.get('seed'))
        self.player_rng = np.random.default_rng(self.config.get('player_seed'))

        # Data collection
        self.stats = defaultdict(int)

    def validate(self):
        games = self.config.get('games')
        if not is_integer(games) or games < 1:
            raise InvalidConfiguration(f"games must be a positive integer, got {games!r}")
        door_counts = self.config.get('door_counts') or []
        if not door_counts:
            raise InvalidConfiguration("door_counts must list at least one door count")
        for n_doors in door_counts:
            if not is_integer(n_doors) or n_doors < MIN_DOORS:
                raise InvalidConfiguration(
                    f"door counts must be integers >= {MIN_DOORS}, got {n_doors!r}")

        self.config['games'] = int(games)
        # Each door count is simulated once, in the order first given
        self.config['door_counts'] = list(dict.fromkeys(int(n) for n in door_counts))

    def header(self):
        doors = ', '.join(str(n) for n in self.config['door_counts'])
        print(f"--- Simulating {self.config['games']} games per strategy "
              f"with {doors} doors ---")

    def win_probability(self, n_doors, strategy):
        """Play the configured number of games with one strategy
        Returns the observed winning probability between 0 and 1
        """
        if strategy not in STRATEGIES:
            raise InvalidConfiguration(f"Player strategy not supported {strategy!r}")
        games = self.config['games']
        wins = 0
        for game_idx in range(games):
            # The candidate picks a door at random
            first_choice = int(self.player_rng.integers(n_doors))
            game = Game(n_doors, first_choice, rng=self.rng)
            wins += game.play(strategy)
            if self.config.get('verbose', 0) > 1:
                logger.debug("Game %d: %r", game_idx + 1, game)

        basekey = f"{n_doors}_doors_{strategy}"
        self.stats[basekey] += games
        self.stats[f"{basekey}_wins"] += wins
        logger.info("%d-doors games, %s: won %d / %d", n_doors, strategy, wins, games)
        return wins / games

    def compare(self, n_doors):
        games = self.config['games']
        stay = self.win_probability(n_doors, 'stay')
        switch = self.win_probability(n_doors, 'switch')

        kind = ("the original Monty Hall problem" if n_doors == MIN_DOORS
                else "a generalization of the Monty Hall problem")
        print(f"\nComparing {n_doors}-doors games ({kind}):")
        print(f"Probability to win a {n_doors}-doors game when NEVER changing from the "
              f"initial choice: {stay * 100:.2f}% (for {games} games)")
        print(f"Probability to win a {n_doors}-doors game when ALWAYS changing the "
              f"initial choice: {switch * 100:.2f}% (for {games} games)")
        return stay, switch

    def simulate(self):
        return {n_doors: self.compare(n_doors) for n_doors in self.config['door_counts']}
