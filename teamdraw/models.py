"""Participants and the groups they are drafted into."""

from collections import namedtuple

from .errors import GroupFullError

Participant = namedtuple("Participant", ["name", "rating"])


class Group:
    """
    A named, fixed-capacity accumulator of participants.

    The aggregate strength is kept in step with the member list by admit(),
    which is the only way members are added.
    """

    def __init__(self, name, capacity):
        self.name = name
        self.capacity = capacity
        self.members = []
        self.aggregate_strength = 0.0

    def is_complete(self):
        return len(self.members) == self.capacity

    def admit(self, participant):
        """
        Add a participant to the group

        Args:
            participant: Participant to add

        Raises:
            GroupFullError: If the group already holds `capacity` members
        """
        if self.is_complete():
            raise GroupFullError(self.name)
        self.members.append(participant)
        self.aggregate_strength += participant.rating

    def reset(self):
        self.members.clear()
        self.aggregate_strength = 0.0

    def __repr__(self):
        return f"Group({self.name!r}, {len(self.members)}/{self.capacity}, {self.aggregate_strength})"

    def __str__(self):
        lines = [f"{self.name} [strength = {self.aggregate_strength}, players = {{"]
        lines.append(
            ",".join(f"\n\t{p.name} ({p.rating})" for p in self.members)
        )
        lines.append("}]")
        return "".join(lines)
