from __future__ import annotations

from keyedit.cmd_base import Base
from keyedit.edit_list import Edit
from keyedit.replay import Replay, apply_edits


class Apply(Base):
    def run(self) -> None:
        if len(self.args) != 2:
            self.eprintln("usage: keyedit apply <old> <script>")
            self.exit(129)

        old = self.read_keys(self.args[0])
        script = self.read_text(self.args[1])
        edits = []

        for number, line in enumerate(script.splitlines(), start=1):
            if not line.strip():
                continue
            try:
                edits.append(Edit.parse(line))
            except Edit.ParseError as error:
                self.eprintln(f"fatal: bad edit on line {number}: {error}")
                self.exit(128)

        try:
            result = apply_edits(old, edits)
        except Replay.Error as error:
            self.eprintln(f"fatal: {error}")
            self.exit(128)

        for key in result:
            self.println(str(key))

        self.exit(0)
