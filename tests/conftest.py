from __future__ import annotations

from io import StringIO
from pathlib import Path
from typing import Callable, Generator, Mapping, Protocol, TextIO, TypeAlias, cast

import pytest

from keyedit import config_stack
from keyedit.cmd_base import Base
from keyedit.command import Command
from tests.cmd_helpers import CapturedStderr

KeyeditCmdResult: TypeAlias = tuple[Base, StringIO, StringIO, CapturedStderr]

WriteFile: TypeAlias = Callable[[str, str], None]


class KeyeditCmd(Protocol):
    def __call__(
        self,
        *argv: str,
        env: Mapping[str, str] | None = None,
        stdin_data: str = "",
    ) -> "KeyeditCmdResult": ...


@pytest.fixture
def work_path(tmp_path: Path) -> Path:
    path = tmp_path / "work"
    path.mkdir()
    return path


@pytest.fixture(autouse=True)
def isolate_global_config(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Path:
    path = tmp_path / "home" / ".keyeditconfig"
    monkeypatch.setattr(config_stack, "GLOBAL_CONFIG", path)
    return path


@pytest.fixture
def write_file(work_path: Path) -> WriteFile:
    def _write_file(name: str, contents: str) -> None:
        path = work_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            f.write(contents)

    return _write_file


@pytest.fixture
def keyedit_cmd(work_path: Path) -> Generator[KeyeditCmd]:
    to_close = []

    def _keyedit_cmd(
        *argv: str,
        env: Mapping[str, str] | None = None,
        stdin_data: str = "",
    ) -> KeyeditCmdResult:
        env = env or {}
        stdin = StringIO(stdin_data)
        stdout = StringIO()
        stderr = CapturedStderr()
        to_close.append(stderr)
        cmd = Command.execute(
            work_path,
            cast(dict[str, str], env),
            ["keyedit"] + list(argv),
            stdin,
            stdout,
            cast(TextIO, stderr),
        )
        return cmd, stdin, stdout, stderr

    yield _keyedit_cmd

    for s in to_close:
        s.close()
