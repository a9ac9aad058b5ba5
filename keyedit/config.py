from __future__ import annotations

import re
from collections import defaultdict
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Pattern, Sequence, TextIO, Tuple, TypeAlias, cast

ConfigValue: TypeAlias = bool | int | str

SECTION_LINE: Pattern[str] = re.compile(
    r'^\s*\[([a-z0-9-]+)( "(.+)")?\]\s*(?:$|#|;)', re.I
)
VARIABLE_LINE: Pattern[str] = re.compile(
    r"^\s*([a-z][a-z0-9-]*)\s*=\s*(.*?)\s*(?:$|#|;)", re.I | re.M
)
BLANK_LINE: Pattern[str] = re.compile(r"^\s*(?:$|#|;)")
INTEGER: Pattern[str] = re.compile(r"^-?[1-9][0-9]*$")

VALID_SECTION: Pattern[str] = re.compile(r"^[a-z0-9-]+$", re.I)
VALID_VARIABLE: Pattern[str] = re.compile(r"^[a-z][a-z0-9-]*$", re.I)


@dataclass
class Section:
    name: Sequence[str]

    @staticmethod
    def normalize(name: Sequence[str]) -> tuple[str, str] | None:
        if not name:
            return None
        head = name[0].lower()
        tail = ".".join(name[1:])
        return (head, tail)


@dataclass
class Variable:
    name: str
    value: ConfigValue

    @staticmethod
    def normalize(name: Optional[str]) -> Optional[str]:
        return name.lower() if name else None


@dataclass
class Line:
    text: str
    section: Section
    variable: Optional[Variable] = None

    @property
    def normal_variable(self) -> Optional[str]:
        return Variable.normalize(self.variable.name) if self.variable else None


class ConfigFile:
    class ParseError(Exception):
        pass

    def __init__(self, path: Path) -> None:
        self.path: Path = path
        self.lines: dict[tuple[str, str] | None, List[Line]] = defaultdict(list)
        self.loaded = False

    @staticmethod
    def valid_key(key: Sequence[str]) -> bool:
        return bool(VALID_SECTION.match(key[0])) and bool(
            VALID_VARIABLE.match(key[-1])
        )

    def open(self) -> None:
        if not self.loaded:
            self.read_config_file()
            self.loaded = True

    def get(self, key: Sequence[str]) -> ConfigValue | None:
        try:
            return self.get_all(key)[-1]
        except IndexError:
            return None

    def get_all(self, key: Sequence[str]) -> List[ConfigValue]:
        self.open()
        section, var = self.split_key(key)
        lines = self.find_lines(section, var)
        return [cast(Variable, ln.variable).value for ln in lines]

    def subsections(self, name: str) -> List[str]:
        self.open()
        name = name.lower()
        sections = []
        for norm in self.lines.keys():
            if norm is not None and norm[0] == name and norm[1] != "":
                sections.append(norm[1])
        return sections

    def line_count(self) -> int:
        return sum(len(ls) for ls in self.lines.values())

    def lines_for(self, section: Section) -> List[Line]:
        return self.lines[Section.normalize(section.name)]

    @staticmethod
    def split_key(key: Sequence[str]) -> Tuple[List[str], str]:
        key = list(map(str, key))
        var = key.pop()
        return (key, var)

    def find_lines(self, key: Sequence[str], var: str) -> List[Line]:
        name = Section.normalize(key)
        if name is None or name not in self.lines:
            return []

        normal = Variable.normalize(var)
        return [ln for ln in self.lines[name] if ln.normal_variable == normal]

    def read_config_file(self) -> None:
        self.lines = defaultdict(list)
        section = Section([])

        try:
            with self.path.open("r", encoding="utf-8") as fh:
                while True:
                    try:
                        raw = self.read_line(fh)
                    except EOFError:
                        break
                    line = self.parse_line(section, raw)
                    section = line.section
                    self.lines_for(section).append(line)
        except FileNotFoundError:
            pass

    @staticmethod
    def read_line(fh: TextIO) -> str:
        buffer = ""
        while True:
            chunk = fh.readline()
            if chunk == "":
                raise EOFError
            buffer += chunk
            if not buffer.endswith("\\\n"):
                return buffer

    def parse_line(self, section: Section, line: str) -> Line:
        if m := SECTION_LINE.match(line):
            section = Section([m.group(1)] + ([m.group(3)] if m.group(3) else []))
            return Line(line, section)
        if m := VARIABLE_LINE.match(line):
            variable = Variable(m.group(1), self.parse_value(m.group(2)))
            return Line(line, section, variable)
        if BLANK_LINE.match(line):
            return Line(line, section)
        raise ConfigFile.ParseError(
            f"bad config line {self.line_count() + 1} in file {self.path}"
        )

    @staticmethod
    def parse_value(value: str) -> ConfigValue:
        lower = value.lower()
        if lower in {"yes", "on", "true"}:
            return True
        if lower in {"no", "off", "false"}:
            return False
        if INTEGER.match(value):
            return int(value)
        return value.replace("\\\n", "")
