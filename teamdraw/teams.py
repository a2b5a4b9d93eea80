import logging
import random
from collections import namedtuple

from tqdm import tqdm

from .assembler import assemble_groups
from .balance import evaluate_balance
from .errors import BalanceNotAchievedError, InvalidConfigurationError

"""
Balanced Team Draw

Splits a list of rated participants into equal-size teams. One attempt runs a
randomized draft (see assembler.py) and then checks the balance of the
result: the weakest team must reach 70% of the strongest team's strength.
Unbalanced attempts are thrown away and the whole draft is run again from the
full pool, up to a configurable number of attempts.

Usage:
    result = assemble_until_balanced(participants, ["Red", "Blue"], max_attempts=500)
"""

DEFAULT_MAX_ATTEMPTS = 1000

AssemblyResult = namedtuple(
    "AssemblyResult",
    ["groups", "is_balanced", "min_strength", "max_strength", "unassigned"],
)


def resolve_group_size(participants, group_names, group_size):
    """
    Work out the members per group

    Args:
        participants: Sequence of participants
        group_names: Optional list of group names
        group_size: Explicit size, or None to derive it from the names

    Returns:
        int: Group size
    """
    if group_size is None:
        if not group_names:
            raise InvalidConfigurationError(
                "Either a group size or a list of group names is required"
            )
        return len(participants) // len(group_names)

    if group_size < 0:
        raise InvalidConfigurationError(f"Group size must not be negative, got {group_size}")
    return group_size


def assemble(participants, group_names=None, group_size=None, rng=None):
    """
    Run a single assembly attempt and evaluate it.

    Args:
        participants: Sequence of Participant
        group_names: Optional list of group names
        group_size: Members per group; derived from the group names when omitted
        rng: Random source (random.Random or compatible)

    Returns:
        AssemblyResult: Groups, balance verdict and strength bounds
    """
    size = resolve_group_size(participants, group_names, group_size)
    groups, unassigned = assemble_groups(participants, size, group_names, rng)
    min_strength, max_strength, balanced = evaluate_balance(groups)

    return AssemblyResult(
        groups=tuple(groups),
        is_balanced=balanced,
        min_strength=min_strength,
        max_strength=max_strength,
        unassigned=tuple(unassigned),
    )


def assemble_until_balanced(
    participants,
    group_names=None,
    group_size=None,
    max_attempts=DEFAULT_MAX_ATTEMPTS,
    rng=None,
    should_cancel=None,
    show_progress=False,
):
    """
    Repeat assemble() from scratch until the result is balanced.

    Args:
        participants: Sequence of Participant
        group_names: Optional list of group names
        group_size: Members per group; derived from the group names when omitted
        max_attempts: Attempt budget, or None to retry without limit
        rng: Random source shared by all attempts
        should_cancel: Optional callable checked between attempts
        show_progress: Display a progress bar while drawing

    Returns:
        AssemblyResult: The first balanced result

    Raises:
        BalanceNotAchievedError: Budget exhausted or cancelled before balance was reached
    """
    if max_attempts is not None and max_attempts < 1:
        raise InvalidConfigurationError(f"max_attempts must be at least 1, got {max_attempts}")

    # Resolve once so a bad size fails before any attempt is made
    size = resolve_group_size(participants, group_names, group_size)
    if rng is None:
        rng = random.Random()

    progress_bar = tqdm(total=max_attempts, desc="Drawing teams", disable=not show_progress)
    attempts = 0
    last_result = None

    try:
        while max_attempts is None or attempts < max_attempts:
            if should_cancel is not None and should_cancel():
                logging.info(f"Draw cancelled after {attempts} attempt(s)")
                raise BalanceNotAchievedError(attempts, last_result, cancelled=True)

            attempts += 1
            progress_bar.update(1)
            last_result = assemble(participants, group_names, size, rng)
            logging.debug(
                f"Attempt {attempts}: min={last_result.min_strength:.2f} "
                f"max={last_result.max_strength:.2f} balanced={last_result.is_balanced}"
            )

            if last_result.is_balanced:
                logging.info(f"Balanced teams found after {attempts} attempt(s)")
                return last_result
    finally:
        progress_bar.close()

    logging.warning(f"No balanced teams after {attempts} attempt(s)")
    raise BalanceNotAchievedError(attempts, last_result)
