from __future__ import annotations

from pathlib import Path
from typing import Mapping, Sequence

from keyedit.config import ConfigFile, ConfigValue

GLOBAL_CONFIG = Path("~/.keyeditconfig").expanduser()
LOCAL_CONFIG = ".keyeditconfig"


class ConfigStack:
    def __init__(self, _dir: Path, env: Mapping[str, str] | None = None) -> None:
        env = env or {}
        self.dir = _dir
        self.configs = {
            "global": ConfigFile(GLOBAL_CONFIG),
            "local": ConfigFile(_dir / LOCAL_CONFIG),
        }
        if env.get("KEYEDIT_CONFIG"):
            self.configs["env"] = ConfigFile(_dir / env["KEYEDIT_CONFIG"])

    def file(self, name: str) -> ConfigFile:
        return self.configs.get(name) or ConfigFile(self.dir / name)

    def get(self, key: Sequence[str]) -> ConfigValue | None:
        try:
            return self.get_all(key)[-1]
        except IndexError:
            return None

    def get_all(self, key: Sequence[str]) -> list[ConfigValue]:
        values: list[ConfigValue] = []
        for cfg in self.configs.values():
            values.extend(cfg.get_all(key))
        return values
