"""Balanced team draw."""

from .assembler import assemble_groups, pick_participant, tier_for_weight
from .balance import BALANCE_RATIO, evaluate_balance
from .config import TeamConfig, default_config, load_config, parse_config, save_config
from .errors import (
    BalanceNotAchievedError,
    GroupFullError,
    InvalidConfigurationError,
    TeamDrawError,
)
from .models import Group, Participant
from .teams import DEFAULT_MAX_ATTEMPTS, AssemblyResult, assemble, assemble_until_balanced

__version__ = "1.0.0"
