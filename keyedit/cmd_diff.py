from __future__ import annotations

from keyedit.cmd_base import Base
from keyedit.diff import diff
from keyedit.print_edits import PrintEditsMixin


class Diff(PrintEditsMixin, Base):
    def run(self) -> None:
        self.stat = False
        paths: list[str] = []

        for arg in self.args:
            if arg == "--stat":
                self.stat = True
            elif arg == "--color":
                self.color = True
            elif arg == "--no-color":
                self.color = False
            elif arg.startswith("-") and arg != "-":
                self.eprintln(f"error: unknown option: {arg}")
                self.exit(129)
            else:
                paths.append(arg)

        if len(paths) != 2:
            self.eprintln("usage: keyedit diff [--stat] <old> <new>")
            self.exit(129)

        old = self.read_keys(paths[0])
        new = self.read_keys(paths[1])
        edits = diff(old, new)

        self.setup_pager()

        if self.stat:
            self.print_stat(edits)
        else:
            self.print_edits(edits)

        self.exit(0)
