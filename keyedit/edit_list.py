from __future__ import annotations

from dataclasses import dataclass
from typing import Generator, Hashable, Sequence, TypeAlias

Key: TypeAlias = Hashable

KEEP = "keep"
MOVE_BEFORE = "move-before"
MOVE_AFTER = "move-after"
CREATE = "create"
APPEND = "append"
REMOVE = "remove"

ANCHORED: frozenset[str] = frozenset({MOVE_BEFORE, MOVE_AFTER, CREATE})
UNANCHORED: frozenset[str] = frozenset({KEEP, APPEND, REMOVE})


@dataclass(frozen=True)
class Edit:
    ty: str
    key: Key
    ref: Key | None = None

    class ParseError(Exception):
        pass

    def __str__(self) -> str:
        if self.ty in ANCHORED:
            return f"{self.ty} {self.key} {self.ref}"
        return f"{self.ty} {self.key}"

    @classmethod
    def parse(cls, line: str) -> Edit:
        fields = line.split()
        if not fields:
            raise Edit.ParseError("empty edit line")

        ty, args = fields[0], fields[1:]
        if ty in ANCHORED and len(args) == 2:
            return cls(ty, args[0], args[1])
        if ty in UNANCHORED and len(args) == 1:
            return cls(ty, args[0])
        if ty not in ANCHORED | UNANCHORED:
            raise Edit.ParseError(f"unknown edit type: {ty}")
        raise Edit.ParseError(f"wrong number of fields for {ty}: {line.strip()}")


class EditList:
    """
    Greedy keyed-list reconciliation in the style of virtual-DOM child
    diffing: two cursors close in on each sequence from both ends, matching
    heads, tails and crossed ends before falling back to a search of the
    remaining old range.
    """

    def __init__(self, old: Sequence[Key], new: Sequence[Key]):
        self.old = list(old)
        self.new = list(new)
        self.consumed: set[int] = set()

    @classmethod
    def diff(cls, old: Sequence[Key], new: Sequence[Key]) -> list[Edit]:
        return list(cls(old, new).each())

    def each(self) -> Generator[Edit]:
        old, new = self.old, self.new
        old_start, old_end = 0, len(old) - 1
        new_start, new_end = 0, len(new) - 1

        while old_start <= old_end and new_start <= new_end:
            if old_start in self.consumed:
                old_start += 1
            elif old_end in self.consumed:
                old_end -= 1
            elif old[old_start] == new[new_start]:
                yield Edit(KEEP, old[old_start])
                old_start += 1
                new_start += 1
            elif old[old_end] == new[new_end]:
                yield Edit(KEEP, old[old_end])
                old_end -= 1
                new_end -= 1
            elif old[old_start] == new[new_end]:
                yield Edit(MOVE_AFTER, old[old_start], old[old_end])
                old_start += 1
                new_end -= 1
            elif old[old_end] == new[new_start]:
                yield Edit(MOVE_BEFORE, old[old_end], old[old_start])
                old_end -= 1
                new_start += 1
            else:
                key = new[new_start]
                index = self._find(key, old_start, old_end)

                if index is None:
                    yield Edit(CREATE, key, old[old_start])
                else:
                    yield Edit(MOVE_BEFORE, key, old[old_start])
                    self.consumed.add(index)

                new_start += 1

        if old_start > old_end:
            yield from self._insertions(new_start, new_end)
        else:
            yield from self._removals(old_start, old_end)

    def _find(self, key: Key, start: int, end: int) -> int | None:
        for index in range(start, end + 1):
            if index not in self.consumed and self.old[index] == key:
                return index
        return None

    def _insertions(self, start: int, end: int) -> Generator[Edit]:
        # The block goes in front of whatever follows it in the new sequence,
        # which by now sits in its final place.
        anchor_index = end + 1

        if anchor_index < len(self.new):
            anchor = self.new[anchor_index]
            for index in range(start, end + 1):
                yield Edit(CREATE, self.new[index], anchor)
        else:
            for index in range(start, end + 1):
                yield Edit(APPEND, self.new[index])

    def _removals(self, start: int, end: int) -> Generator[Edit]:
        for index in range(start, end + 1):
            if index not in self.consumed:
                yield Edit(REMOVE, self.old[index])
