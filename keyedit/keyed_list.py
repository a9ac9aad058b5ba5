from __future__ import annotations

import logging
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

from keyedit.edit_list import Edit, EditList, Key
from keyedit.replay import Replay

log = logging.getLogger(__name__)

T = TypeVar("T")
V = TypeVar("V")


def default_key(item: Any) -> Key:
    return item.key


class KeyedList(Generic[T, V]):
    """
    An ordered collection of objects rendered from data items, kept in step
    with a changing list of items.

    Objects are created once per key with `render`. On every `sync`, objects
    whose key survives get `update` with the fresh item, new keys are
    rendered, and the edit list between the old and new keys decides where
    each object goes. Objects for keys that disappear are handed to
    `dispose`.
    """

    def __init__(
        self,
        render: Callable[[T], V],
        to_key: Callable[[T], Key] = default_key,
        update: Callable[[V, T], None] | None = None,
        dispose: Callable[[V], None] | None = None,
        data: Iterable[T] | None = None,
    ) -> None:
        self.render = render
        self.to_key = to_key
        self.update = update
        self.dispose = dispose
        self.lookup: dict[Key, V] = {}
        self.order = _Order(self)

        if data is not None:
            self.sync(data)

    def sync(self, data: Iterable[T]) -> list[Edit]:
        next_keys: list[Key] = []
        rendered: dict[Key, V] = {}

        try:
            for item in data:
                key = self.to_key(item)
                next_keys.append(key)

                if key in self.lookup:
                    if self.update is not None:
                        self.update(self.lookup[key], item)
                elif key not in rendered:
                    rendered[key] = self.render(item)
        except Exception:
            # Nothing rendered in a failed sync is ever placed.
            if self.dispose is not None:
                for obj in rendered.values():
                    self.dispose(obj)
            raise

        self.lookup.update(rendered)

        edits = EditList.diff(self.order.keys, next_keys)
        self.order.apply(edits)
        log.debug("synced %d items with %d edits", len(next_keys), len(edits))
        return edits

    def keys(self) -> list[Key]:
        return list(self.order.keys)

    def items(self) -> list[V]:
        return [self.lookup[key] for key in self.order.keys]

    def get(self, key: Key) -> V | None:
        return self.lookup.get(key)

    def __len__(self) -> int:
        return len(self.order.keys)

    def __iter__(self) -> Iterator[V]:
        return iter(self.items())


class _Order(Replay):
    def __init__(self, owner: KeyedList[Any, Any]) -> None:
        super().__init__()
        self.owner = owner

    def remove(self, key: Key) -> None:
        super().remove(key)
        obj = self.owner.lookup.pop(key)
        if self.owner.dispose is not None:
            self.owner.dispose(obj)
