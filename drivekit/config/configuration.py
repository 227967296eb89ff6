"""
Configuration management for drivekit
"""

from dataclasses import dataclass, field
from typing import Optional

import toml

from drivekit.utils.logger import LEVEL_MAP


# ---------------- OUTPUT ----------------

@dataclass
class OutputConfig:
    log_level: str = "info"
    log_file: Optional[str] = None
    log_type: str = "plain"


# ---------------- FILTERS ----------------

@dataclass
class FiltersConfig:
    comment_marker: str = "#"
    ignore_file: str = ".driveignore"


# ---------------- SHORTCUT ----------------

@dataclass
class ShortcutConfig:
    extension: str = ".desktop"


# ---------------- ROOT CONFIG ----------------
@dataclass
class DriveConfiguration:
    output: OutputConfig = field(default_factory=OutputConfig)
    filters: FiltersConfig = field(default_factory=FiltersConfig)
    shortcut: ShortcutConfig = field(default_factory=ShortcutConfig)

    # ---------- validation ----------
    def validate(self):
        if self.output.log_level.lower() not in LEVEL_MAP:
            raise ValueError(f"Unknown log level: {self.output.log_level}")

        if self.output.log_type not in ("plain", "json"):
            raise ValueError(f"Unknown log type: {self.output.log_type}")

        # an empty marker would match every line
        if not self.filters.comment_marker:
            raise ValueError("comment_marker must not be empty")

    # ---------- TOML ----------

    def load_from_toml(self, path: str):
        data = toml.load(path)

        for section, values in data.items():
            if hasattr(self, section):
                obj = getattr(self, section)
                for key, value in values.items():
                    if hasattr(obj, key):
                        setattr(obj, key, value)
