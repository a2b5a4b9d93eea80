from teamdraw.models import Participant


class ScriptedRandom:
    """Random source that replays fixed values and never reorders anything."""

    def __init__(self, values=()):
        self.values = list(values)

    def random(self):
        return self.values.pop(0)

    def shuffle(self, seq):
        pass


def make_participants(*ratings):
    return [Participant(f"P{i}", float(r)) for i, r in enumerate(ratings, start=1)]
