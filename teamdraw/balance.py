"""Balance check for a finished set of groups."""

# Weakest group must reach this fraction of the strongest group's strength
BALANCE_RATIO = 0.7


def strength_bounds(groups):
    """
    Weakest and strongest aggregate strength

    Args:
        groups: List of Group

    Returns:
        tuple: (min strength, max strength), (0.0, 0.0) for no groups
    """
    strengths = [group.aggregate_strength for group in groups]
    if not strengths:
        return 0.0, 0.0
    return min(strengths), max(strengths)


def is_balanced(min_strength, max_strength, ratio=BALANCE_RATIO):
    return not (min_strength < ratio * max_strength)


def evaluate_balance(groups, ratio=BALANCE_RATIO):
    """
    Evaluate the balance of the given groups. Does not modify them.

    Args:
        groups: List of complete groups
        ratio: Minimum weakest/strongest ratio that still counts as balanced

    Returns:
        tuple: (min strength, max strength, balanced flag)
    """
    min_strength, max_strength = strength_bounds(groups)
    return min_strength, max_strength, is_balanced(min_strength, max_strength, ratio)
