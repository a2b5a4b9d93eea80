import json
import logging
import math
import os

from .errors import InvalidConfigurationError
from .models import Participant
from .teams import DEFAULT_MAX_ATTEMPTS

DEFAULT_CONFIG_FILE = "team-config.json"
DEFAULT_PLAYERS_PER_TEAM = 2

# Built-in roster used when no configuration file is available
DEFAULT_PLAYERS = [
    ("Alex", 3),
    ("Andre", 2),
    ("Augusto", 3),
    ("Bruno", 4),
    ("Diego", 3),
    ("Diogo", 4),
    ("Duda", 4),
    ("Felipe", 4),
    ("Guilhermo", 3),
    ("Jean", 3),
    ("Juan", 2),
    ("Leo", 4),
    ("Leonardo", 3),
    ("Lucio", 3),
    ("Marcelo", 3),
    ("Pedro", 3),
    ("Rafael", 3),
    ("Rodrigo", 4),
    ("Tiago", 3),
    ("Thiago", 2),
]


class TeamConfig:
    """Resolved configuration for a draw."""

    def __init__(
        self,
        participants,
        group_names=None,
        score_scale=None,
        max_attempts=DEFAULT_MAX_ATTEMPTS,
        random_seed=None,
        group_size=None,
    ):
        self.participants = list(participants)
        self.group_names = list(group_names) if group_names else []
        self.score_scale = score_scale
        self.max_attempts = max_attempts
        self.random_seed = random_seed
        self._group_size = group_size

    def group_size(self):
        """
        Players per team: the explicit size when one was given, otherwise
        the player count divided by the number of team names.
        """
        if self._group_size is not None:
            return self._group_size

        num_players = len(self.participants)
        num_teams = len(self.group_names)
        if num_teams == 0:
            return DEFAULT_PLAYERS_PER_TEAM
        if num_players % num_teams != 0:
            raise InvalidConfigurationError(
                f"Number of players ({num_players}) must be evenly divisible by number of teams ({num_teams}). "
                f"Current division results in {num_players // num_teams} players per team "
                f"with {num_players % num_teams} remaining players."
            )
        return num_players // num_teams

    def validate(self):
        if not self.participants:
            raise InvalidConfigurationError("Players list cannot be empty")
        if not self.group_names:
            raise InvalidConfigurationError("Team names list cannot be empty")

        # Raises if not evenly divisible
        self.group_size()

        if self.score_scale is not None:
            low, high = self.score_scale
            if low >= high:
                raise InvalidConfigurationError("Score scale minimum must be less than maximum")
            for p in self.participants:
                if not low <= p.rating <= high:
                    raise InvalidConfigurationError(
                        f"Player {p.name} has score {p.rating:.1f} which is outside "
                        f"the valid range [{low:.1f}, {high:.1f}]"
                    )

        if self.max_attempts is not None and self.max_attempts < 1:
            raise InvalidConfigurationError("maxAttempts must be a positive integer or null")

    def to_dict(self):
        data = {
            "players": [{"name": p.name, "score": p.rating} for p in self.participants],
            "teamNames": list(self.group_names),
            "maxAttempts": self.max_attempts,
            "randomSeed": self.random_seed,
        }
        if self.score_scale is not None:
            data["scoreScale"] = {"min": self.score_scale[0], "max": self.score_scale[1]}
        return data


def _parse_number(value, what):
    # bool is an int subclass but never a valid score
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidConfigurationError(f"{what} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidConfigurationError(f"{what} must be finite, got {value!r}")
    return float(value)


def _parse_player(entry, index):
    if not isinstance(entry, dict):
        raise InvalidConfigurationError(f"Player #{index + 1} must be an object")

    name = entry.get("name")
    if not isinstance(name, str) or not name.strip():
        raise InvalidConfigurationError(f"Player #{index + 1} has no name")

    score = entry.get("score", entry.get("rating"))
    if score is None:
        raise InvalidConfigurationError(f"Player {name} has no score")
    return Participant(name.strip(), _parse_number(score, f"Score of player {name}"))


def _parse_team_name(name, index):
    if not isinstance(name, str) or not name.strip():
        raise InvalidConfigurationError(f"Team name #{index + 1} must be a non-empty string")
    return name.strip()


def parse_config(data):
    """
    Build and validate a TeamConfig from decoded JSON

    Args:
        data: Dict with "players", "teamNames" and optionally "scoreScale",
            "maxAttempts" and "randomSeed"

    Returns:
        TeamConfig: Validated configuration
    """
    if not isinstance(data, dict):
        raise InvalidConfigurationError("Configuration must be a JSON object")

    players = data.get("players")
    if not isinstance(players, list):
        raise InvalidConfigurationError("Players list cannot be null or empty")
    team_names = data.get("teamNames")
    if not isinstance(team_names, list):
        raise InvalidConfigurationError("Team names list cannot be null or empty")

    participants = [_parse_player(entry, i) for i, entry in enumerate(players)]
    group_names = [_parse_team_name(name, i) for i, name in enumerate(team_names)]

    score_scale = None
    if data.get("scoreScale") is not None:
        scale = data["scoreScale"]
        if not isinstance(scale, dict):
            raise InvalidConfigurationError("scoreScale must be an object with min and max")
        score_scale = (
            _parse_number(scale.get("min"), "Score scale minimum"),
            _parse_number(scale.get("max"), "Score scale maximum"),
        )

    max_attempts = data.get("maxAttempts", DEFAULT_MAX_ATTEMPTS)
    if max_attempts is not None and (
        isinstance(max_attempts, bool) or not isinstance(max_attempts, int)
    ):
        raise InvalidConfigurationError("maxAttempts must be a positive integer or null")

    random_seed = data.get("randomSeed")
    if random_seed is not None and (
        isinstance(random_seed, bool) or not isinstance(random_seed, (int, str))
    ):
        raise InvalidConfigurationError("randomSeed must be an integer, string or null")

    config = TeamConfig(
        participants,
        group_names=group_names,
        score_scale=score_scale,
        max_attempts=max_attempts,
        random_seed=random_seed,
    )
    config.validate()
    return config


def load_config(config_path):
    """
    Load configuration from a JSON file

    Args:
        config_path: Path to the JSON configuration file

    Returns:
        TeamConfig: Validated configuration
    """
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise InvalidConfigurationError(f"Config file '{config_path}' not found") from e
    except json.JSONDecodeError as e:
        raise InvalidConfigurationError(f"Config file '{config_path}' is not valid JSON: {e}") from e
    except OSError as e:
        raise InvalidConfigurationError(f"Could not read config file '{config_path}': {e}") from e

    logging.info(f"Loaded configuration from {config_path}")
    return parse_config(data)


def save_config(config, config_path):
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(config.to_dict(), f, indent=2)
    logging.info(f"Saved configuration to {config_path}")


def default_config():
    """Built-in roster drawn into pairs with generated team names."""
    participants = [Participant(name, float(score)) for name, score in DEFAULT_PLAYERS]
    return TeamConfig(participants, group_size=DEFAULT_PLAYERS_PER_TEAM)


def find_default_config(directory=None):
    """Path of team-config.json in the given (or current) directory, if it exists."""
    path = os.path.join(directory or os.getcwd(), DEFAULT_CONFIG_FILE)
    return path if os.path.isfile(path) else None
