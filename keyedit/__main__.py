import os
import sys
from pathlib import Path

from keyedit.cmd_base import Base
from keyedit.command import Command

if len(sys.argv) < 2:
    sys.stderr.write("usage: keyedit <command> [<args>]\n")
    sys.exit(129)

try:
    cmd: Base = Command.execute(
        Path.cwd(),
        os.environ,
        ["keyedit", *sys.argv[1:]],
        sys.stdin,
        sys.stdout,
        sys.stderr,
    )
except Command.Unknown as error:
    sys.stderr.write(f"keyedit: {error}\n")
    sys.exit(129)

sys.exit(cmd.status)
