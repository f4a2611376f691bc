import random


class NamePool:
    """Unused candidate names for one species.

    Names are drawn without replacement. A draw overwrites the chosen slot with the
    last name and shrinks the pool by one, so the order of the remaining names is
    not stable after the first draw.
    """

    def __init__(self, names: list[str] | None = None) -> None:
        self._names: list[str] = list(names or [])

    def __len__(self) -> int:
        return len(self._names)

    def __bool__(self) -> bool:
        return bool(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __repr__(self) -> str:
        return f"NamePool({self._names!r})"

    @property
    def names(self) -> list[str]:
        """Snapshot of the remaining names."""
        return list(self._names)

    def append(self, name: str) -> None:
        self._names.append(name)

    def draw(self, rng: random.Random) -> str | None:
        """Remove and return a uniformly random name, or None when exhausted."""
        if not self._names:
            return None
        index = rng.randrange(len(self._names))
        name = self._names[index]
        self._names[index] = self._names[-1]
        self._names.pop()
        return name
