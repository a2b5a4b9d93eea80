"""
Group assembly

Drafts participants into a fixed number of equal-size groups. Each attempt
shuffles the pool and the group order, then walks the groups repeatedly,
giving every incomplete group one participant per pass. Which participant a
group receives is biased by how the group compares to the pool average:
groups lagging behind tend to draw stronger participants, groups ahead tend
to draw weaker ones.
"""

import logging
import random

from .models import Group

# Generated names wrap around after this many groups
NAME_CYCLE = 26

# (upper bound, tier) pairs; a weight falls into the first band whose upper
# bound it is below. Anything else maps to the top tier.
TIER_BANDS = [
    (0.10, 1),
    (0.25, 2),
    (0.65, 3),
    (0.95, 4),
]
TOP_TIER = 5


class GroupNameSource:
    """Generated names: "Group 1" ... "Group 26", then around again."""

    def name_for(self, index):
        return f"Group {index % NAME_CYCLE + 1}"

    def names(self, count):
        return [self.name_for(i) for i in range(count)]


class ExplicitGroupNames(GroupNameSource):
    """Caller supplied names, with generated names filling any gap."""

    def __init__(self, group_names):
        self.group_names = list(group_names)

    def name_for(self, index):
        if index < len(self.group_names):
            return self.group_names[index]
        return super().name_for(index)


def name_source_for(group_names):
    if group_names:
        return ExplicitGroupNames(group_names)
    return GroupNameSource()


def tier_for_weight(weight):
    """
    Map a signed selection weight onto the 1-5 rating tier

    Args:
        weight: Sum or difference of two uniform draws, in (-1, 2)

    Returns:
        int: Desired rating tier
    """
    if weight < 0:
        return TOP_TIER
    for upper, tier in TIER_BANDS:
        if weight < upper:
            return tier
    return TOP_TIER


def nearest_rating_index(pool, target):
    """Index of the first participant whose rating is closest to target."""
    best_index = None
    best_difference = None
    for i, participant in enumerate(pool):
        difference = abs(participant.rating - target)
        if best_difference is None or difference < best_difference:
            best_index = i
            best_difference = difference
    return best_index


def pick_participant(pool, group, pool_average, rng):
    """
    Take one participant out of the pool for the given group.

    Args:
        pool: List of unassigned participants (modified in place)
        group: Group the participant is drawn for
        pool_average: Mean rating of the full pool for this attempt
        rng: Random source providing random()

    Returns:
        Participant or None if the pool is empty
    """
    if not pool:
        return None
    if len(pool) == 1:
        return pool.pop(0)

    weight = rng.random()
    if group.aggregate_strength < pool_average:
        weight += rng.random()
    else:
        weight -= rng.random()

    tier = tier_for_weight(weight)
    return pool.pop(nearest_rating_index(pool, tier))


def draft(pool, groups, pool_average, rng):
    """
    Fill the groups from the pool in the given group order until the pool
    runs dry or every group is complete.
    """
    while pool:
        for group in groups:
            if not pool:
                break
            if group.is_complete():
                continue
            participant = pick_participant(pool, group, pool_average, rng)
            if participant is None:
                break
            group.admit(participant)

        if all(group.is_complete() for group in groups):
            break


def assemble_groups(participants, group_size, group_names=None, rng=None):
    """
    Run one draft over a fresh pool

    Args:
        participants: Sequence of Participant
        group_size: Members per group
        group_names: Optional list of names, used in order
        rng: Random source with random() and shuffle(); a new
            random.Random is used when omitted

    Returns:
        tuple: (list of complete groups in naming order, list of unassigned participants)
    """
    if rng is None:
        rng = random.Random()

    pool = list(participants)
    if not pool or group_size <= 0:
        return [], pool

    group_count = len(pool) // group_size
    names = name_source_for(group_names)
    groups = [Group(names.name_for(i), group_size) for i in range(group_count)]
    if not groups:
        return [], pool

    # Fixed for the whole attempt, even as the pool shrinks
    pool_average = sum(p.rating for p in pool) / len(pool)

    draft_order = list(groups)
    rng.shuffle(pool)
    rng.shuffle(draft_order)

    logging.debug(
        f"Drafting {len(pool)} participants into {group_count} groups of {group_size} "
        f"(pool average {pool_average:.2f})"
    )
    draft(pool, draft_order, pool_average, rng)

    complete = [g for g in groups if g.is_complete()]
    if pool:
        logging.debug(f"{len(pool)} participant(s) left unassigned")
    return complete, pool
