from __future__ import annotations

from pathlib import Path
from typing import (
    MutableMapping,
    TextIO,
    Type,
)

from keyedit.cmd_apply import Apply
from keyedit.cmd_base import Base
from keyedit.cmd_check import Check
from keyedit.cmd_config import Config
from keyedit.cmd_diff import Diff


class Command:
    class Unknown(Exception):
        pass

    COMMANDS: dict[str, Type[Base]] = {
        "diff": Diff,
        "check": Check,
        "apply": Apply,
        "config": Config,
    }

    @staticmethod
    def execute(
        _dir: Path,
        env: MutableMapping[str, str],
        argv: list[str],
        stdin: TextIO,
        stdout: TextIO,
        stderr: TextIO,
    ) -> Base:
        from keyedit.setup_logging import setup_logging

        setup_logging(
            level=env.get("KEYEDIT_LOG_LEVEL", "WARNING"),
            log_file=env.get("KEYEDIT_LOG_FILE"),
        )

        name = argv[1]
        args = argv[2:]

        if name not in Command.COMMANDS:
            raise Command.Unknown(f"{name} is not a keyedit command")

        cmd_class = Command.COMMANDS[name]
        cmd: Base = cmd_class(_dir, env, args, stdin, stdout, stderr)
        cmd.execute()

        return cmd
