from __future__ import annotations

from keyedit.cmd_base import Base
from keyedit.config import ConfigFile


class Config(Base):
    """
    Reads configuration values from the config stack or a single file.
    """

    def define_options(self) -> None:
        self.file: str | None = None
        self.get_all = False
        positional: list[str] = []
        args = iter(self.args)

        for arg in args:
            if arg == "--get-all":
                self.get_all = True
            elif arg.startswith("--file="):
                self.file = arg.split("=", 1)[1]
            elif arg in ("-f", "--file"):
                self.file = next(args, None)
                if self.file is None:
                    self.eprintln(f"error: flag {arg} needs a value")
                    self.exit(129)
            elif arg in ("--global", "--local"):
                self.file = arg[2:]
            else:
                positional.append(arg)

        self.args = positional

    def run(self) -> None:
        self.define_options()

        if len(self.args) != 1:
            self.eprintln("usage: keyedit config [--file <path>] [--get-all] <name>")
            self.exit(129)

        key = self.parse_key(self.args[0])
        if self.file is None:
            source = self.config
        else:
            source = self.config.file(self.file)

        try:
            values = source.get_all(key)
        except ConfigFile.ParseError as error:
            self.eprintln(f"fatal: {error}")
            self.exit(128)

        if not values:
            self.exit(1)

        for value in values if self.get_all else values[-1:]:
            self.println(self.format_value(value))

        self.exit(0)

    def parse_key(self, name: str) -> list[str]:
        section, _, var = name.rpartition(".")
        if not section:
            self.eprintln(f"error: key does not contain a section: {name}")
            self.exit(2)

        key = section.split(".", 1) + [var]
        if not ConfigFile.valid_key(key):
            self.eprintln(f"error: invalid key: {name}")
            self.exit(1)

        return key

    @staticmethod
    def format_value(value: bool | int | str) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)
