from __future__ import annotations

import logging
from typing import Iterable, Sequence

from keyedit.edit_list import Edit, Key
from keyedit.handler import dispatch

log = logging.getLogger(__name__)


class Replay:
    """
    Applies edits to a working copy of a key list. References are looked up
    in the list as it stands after every earlier edit.
    """

    class Error(Exception):
        pass

    def __init__(self, keys: Sequence[Key] = ()) -> None:
        self.keys: list[Key] = list(keys)

    def keep(self, key: Key) -> None:
        self._index(key)

    def move_before(self, key: Key, ref: Key) -> None:
        self.keys.pop(self._index(key))
        self.keys.insert(self._index(ref), key)

    def move_after(self, key: Key, ref: Key) -> None:
        self.keys.pop(self._index(key))
        self.keys.insert(self._index(ref) + 1, key)

    def create(self, key: Key, ref: Key) -> None:
        self._absent(key)
        self.keys.insert(self._index(ref), key)

    def append(self, key: Key) -> None:
        self._absent(key)
        self.keys.append(key)

    def remove(self, key: Key) -> None:
        self.keys.pop(self._index(key))

    def apply(self, edits: Iterable[Edit]) -> list[Key]:
        for edit in edits:
            log.debug("replay %s", edit)
            dispatch(edit, self)
        return self.keys

    def _index(self, key: Key) -> int:
        try:
            return self.keys.index(key)
        except ValueError:
            raise Replay.Error(f"no such key: {key}") from None

    def _absent(self, key: Key) -> None:
        if key in self.keys:
            raise Replay.Error(f"key already present: {key}")


def apply_edits(old: Sequence[Key], edits: Iterable[Edit]) -> list[Key]:
    return Replay(old).apply(edits)
