from collections import Counter
from typing import Iterable

from keyedit.edit_list import (
    APPEND,
    CREATE,
    KEEP,
    MOVE_AFTER,
    MOVE_BEFORE,
    REMOVE,
    Edit,
)

EDIT_FORMATS: dict[str, str] = {
    "keep": "normal",
    "move": "yellow",
    "new": "green",
    "remove": "red",
    "meta": "bold",
}

SLOTS: dict[str, str] = {
    KEEP: "keep",
    MOVE_BEFORE: "move",
    MOVE_AFTER: "move",
    CREATE: "new",
    APPEND: "new",
    REMOVE: "remove",
}


class PrintEditsMixin:
    def edit_fmt(self, name, text):
        style_str = self.config_get(["color", "edit", name])

        if isinstance(style_str, str) and style_str:
            style = style_str.split()
        else:
            style = EDIT_FORMATS.get(name)

        return self.fmt(style, text)

    def print_edits(self, edits: Iterable[Edit]) -> None:
        for edit in edits:
            self.print_edit(edit)

    def print_edit(self, edit: Edit) -> None:
        self.println(self.edit_fmt(SLOTS[edit.ty], str(edit)))

    def print_stat(self, edits: list[Edit]) -> None:
        counts = Counter(SLOTS[edit.ty] for edit in edits)
        summary = (
            f"{counts['keep']} kept, {counts['move']} moved, "
            f"{counts['new']} created, {counts['remove']} removed"
        )
        self.println(self.edit_fmt("meta", summary))
