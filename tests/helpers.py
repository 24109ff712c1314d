"""Small builders shared by the test modules."""

from typing import Iterable


class ScriptedUniform:
    """Uniform source that replays a fixed sequence of draws."""

    def __init__(self, values: Iterable[float]):
        self._values = list(values)
        self.calls = 0

    def random(self) -> float:
        value = self._values[self.calls]
        self.calls += 1
        return value
