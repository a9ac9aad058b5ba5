from __future__ import annotations

from collections import defaultdict

from keyedit.cmd_base import Base
from keyedit.diff import diff
from keyedit.edit_list import (
    APPEND,
    CREATE,
    KEEP,
    MOVE_AFTER,
    MOVE_BEFORE,
    REMOVE,
    Edit,
    Key,
)
from keyedit.replay import Replay, apply_edits


class Check(Base):
    """
    Replays the edit list between two key lists and verifies that it
    reproduces the new list, touching every key exactly once.
    """

    def run(self) -> None:
        if len(self.args) != 2:
            self.eprintln("usage: keyedit check <old> <new>")
            self.exit(129)

        old = self.read_keys(self.args[0])
        new = self.read_keys(self.args[1])
        edits = diff(old, new)

        problems = self.coverage_problems(old, new, edits)

        try:
            result = apply_edits(old, edits)
        except Replay.Error as error:
            problems.append(f"replay failed: {error}")
        else:
            if result != new:
                problems.append(
                    f"replay produced {' '.join(map(str, result))}"
                    f" instead of {' '.join(map(str, new))}"
                )

        for problem in problems:
            self.eprintln(f"error: {problem}")

        if problems:
            self.exit(1)

        self.println(f"ok: {len(edits)} edits")
        self.exit(0)

    @staticmethod
    def coverage_problems(
        old: list[Key], new: list[Key], edits: list[Edit]
    ) -> list[str]:
        seen: dict[Key, list[str]] = defaultdict(list)
        for edit in edits:
            seen[edit.key].append(edit.ty)

        problems = []
        old_set, new_set = set(old), set(new)

        for key in old_set | new_set:
            types = seen.get(key, [])
            if key in old_set and key in new_set:
                expected = {KEEP, MOVE_BEFORE, MOVE_AFTER}
            elif key in new_set:
                expected = {CREATE, APPEND}
            else:
                expected = {REMOVE}

            if len(types) != 1 or types[0] not in expected:
                problems.append(f"{key} received {', '.join(types) or 'no edits'}")

        return sorted(problems)
