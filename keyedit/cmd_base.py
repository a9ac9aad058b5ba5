from __future__ import annotations

import io
import logging
from functools import cached_property
from pathlib import Path
from typing import MutableMapping, TextIO

from keyedit.cmd_color import Color
from keyedit.config import ConfigFile
from keyedit.config_stack import ConfigStack
from keyedit.diff import duplicates, keys
from keyedit.edit_list import Key
from keyedit.pager import Pager

log = logging.getLogger(__name__)


class Base:
    def __init__(
        self,
        _dir: Path,
        env: MutableMapping[str, str],
        args: list[str],
        stdin: TextIO,
        stdout: TextIO,
        stderr: TextIO,
    ):
        self.dir: Path = _dir
        self.env: MutableMapping[str, str] = env
        self.args: list[str] = args
        self.stdin: TextIO = stdin
        self.stdout: TextIO = stdout
        self.stderr: TextIO = stderr
        self.status: int | None = None
        self.isatty: bool = stdout.isatty()
        self.color: bool | None = None
        self.pager: Pager | None = None
        self.stdin_used = False

    @cached_property
    def config(self) -> ConfigStack:
        return ConfigStack(self.dir, self.env)

    def config_get(self, key: list[str]) -> bool | int | str | None:
        try:
            return self.config.get(key)
        except ConfigFile.ParseError as error:
            self.eprintln(f"fatal: {error}")
            self.exit(128)

    def setup_pager(self) -> None:
        if self.pager is not None:
            return

        if not self.stdout.isatty():
            return

        command = self.config_get(["core", "pager"])
        self.pager = Pager(
            self.env, self.stdout, self.stderr, str(command) if command else None
        )
        self.stdout = self.pager.input

    def exit(self, status: int = 0) -> None:
        self.status = status
        raise ExitSignal(self.status)

    def execute(self) -> int:
        try:
            self.run()
            self.status = 0
        except ExitSignal as e:
            self.status = e.status

        self.stdout.flush()
        self.stderr.flush()

        if getattr(self, "pager", None) is not None:
            self.stdout.close()
            assert self.pager is not None
            self.pager.wait()

        assert self.status is not None
        return self.status

    def expanded_path(self, path: str) -> Path:
        return (self.dir / path).absolute()

    def read_text(self, name: str) -> str:
        if name == "-":
            if self.stdin_used:
                self.eprintln("fatal: standard input can only be read once")
                self.exit(128)
            self.stdin_used = True
            return self.stdin.read()

        try:
            return self.expanded_path(name).read_text(encoding="utf-8")
        except OSError as error:
            self.eprintln(f"fatal: could not read '{name}': {error.strerror}")
            self.exit(128)

    def read_keys(self, name: str) -> list[Key]:
        """
        Load a whitespace separated key list. Repeated keys are reported,
        or refused when core.strict is set.
        """
        result = keys(self.read_text(name))
        repeated = duplicates(result)

        if repeated:
            listing = ", ".join(str(k) for k in repeated)
            log.debug("duplicate keys in %s: %s", name, listing)

            if self.config_get(["core", "strict"]) is True:
                self.eprintln(f"fatal: duplicate keys in {name}: {listing}")
                self.exit(128)
            self.eprintln(f"warning: duplicate keys in {name}: {listing}")

        return result

    def fmt(self, style: str | list[str], string: str) -> str:
        if self.color is None:
            self.color = self.isatty and self.config_get(["color", "ui"]) is not False
        return Color.format(style, string) if self.color else string

    def run(self) -> None:
        raise NotImplementedError(f"{self.__class__.__name__}.run() not implemented")

    def println(self, string: str) -> None:
        if isinstance(self.stdout, io.BufferedIOBase):
            self.stdout.write((string + "\n").encode("utf-8"))
        else:
            self.stdout.write(string + "\n")

    def eprintln(self, string: str) -> None:
        if isinstance(self.stderr, io.BufferedIOBase):
            self.stderr.write((string + "\n").encode("utf-8"))
        else:
            self.stderr.write(string + "\n")


class ExitSignal(Exception):
    def __init__(self, status: int = 0) -> None:
        super().__init__(f"Exit with status {status}")
        self.status: int | None = status
