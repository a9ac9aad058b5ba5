from __future__ import annotations

from typing import Protocol, Sequence

from keyedit.edit_list import (
    APPEND,
    CREATE,
    KEEP,
    MOVE_AFTER,
    MOVE_BEFORE,
    REMOVE,
    Edit,
    EditList,
    Key,
)


class EditHandler(Protocol):
    def keep(self, key: Key) -> None: ...

    def move_before(self, key: Key, ref: Key) -> None: ...

    def move_after(self, key: Key, ref: Key) -> None: ...

    def create(self, key: Key, ref: Key) -> None: ...

    def append(self, key: Key) -> None: ...

    def remove(self, key: Key) -> None: ...


def dispatch(edit: Edit, handler: EditHandler) -> None:
    match edit.ty:
        case c if c == KEEP:
            handler.keep(edit.key)
        case c if c == MOVE_BEFORE:
            handler.move_before(edit.key, edit.ref)
        case c if c == MOVE_AFTER:
            handler.move_after(edit.key, edit.ref)
        case c if c == CREATE:
            handler.create(edit.key, edit.ref)
        case c if c == APPEND:
            handler.append(edit.key)
        case c if c == REMOVE:
            handler.remove(edit.key)
        case _:
            raise ValueError(f"unknown edit type: {edit.ty}")


def edit_list(old: Sequence[Key], new: Sequence[Key], handler: EditHandler) -> None:
    """
    Notify `handler` of every edit needed to turn `old` into `new`.

    Callbacks fire as each edit is computed, in order. Anything a callback
    raises propagates to the caller and ends the computation.
    """
    for edit in EditList(old, new).each():
        dispatch(edit, handler)


class Recorder:
    def __init__(self) -> None:
        self.edits: list[Edit] = []

    def keep(self, key: Key) -> None:
        self.edits.append(Edit(KEEP, key))

    def move_before(self, key: Key, ref: Key) -> None:
        self.edits.append(Edit(MOVE_BEFORE, key, ref))

    def move_after(self, key: Key, ref: Key) -> None:
        self.edits.append(Edit(MOVE_AFTER, key, ref))

    def create(self, key: Key, ref: Key) -> None:
        self.edits.append(Edit(CREATE, key, ref))

    def append(self, key: Key) -> None:
        self.edits.append(Edit(APPEND, key))

    def remove(self, key: Key) -> None:
        self.edits.append(Edit(REMOVE, key))
