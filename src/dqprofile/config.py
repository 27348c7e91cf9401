"""
Profiler configuration.

Values come from DQPROFILE_* environment variables (a .env file is honoured)
and can be overridden by the CLI:

  DQPROFILE_ENTITY_NAME        entity / table being profiled
  DQPROFILE_DATE_COLUMN        date column for the range rows ("" disables it)
  DQPROFILE_MAX_SAMPLE_VALUES  max number of samples per column
  DQPROFILE_ROW_LIMIT          -1 for all rows, N for the first N rows
  DQPROFILE_TABLE_NAME         label written to the TableName column
"""
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from dotenv import load_dotenv

from .errors import ConfigError

ENV_PREFIX = "DQPROFILE_"


def _int_env(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(ENV_PREFIX + key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigError(f"{ENV_PREFIX}{key} must be an integer, got {raw!r}") from e


@dataclass(frozen=True)
class ProfilerConfig:
    entity_name: str = "your_entity_name"
    date_column_name: str = "week_date"
    max_sample_values: int = 5
    row_limit: int = -1
    table_name: Optional[str] = None

    @property
    def table_label(self) -> str:
        return self.table_name if self.table_name else self.entity_name

    def validate(self) -> "ProfilerConfig":
        if self.max_sample_values < 1:
            raise ConfigError(f"max_sample_values must be a positive integer, got {self.max_sample_values}")
        if self.row_limit < -1:
            raise ConfigError(f"row_limit must be -1 or >= 0, got {self.row_limit}")
        return self

    def with_overrides(self, **overrides) -> "ProfilerConfig":
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "ProfilerConfig":
        if env is None:
            load_dotenv()
            env = os.environ
        defaults = cls()
        return cls(
            entity_name=env.get(ENV_PREFIX + "ENTITY_NAME", defaults.entity_name),
            date_column_name=env.get(ENV_PREFIX + "DATE_COLUMN", defaults.date_column_name),
            max_sample_values=_int_env(env, "MAX_SAMPLE_VALUES", defaults.max_sample_values),
            row_limit=_int_env(env, "ROW_LIMIT", defaults.row_limit),
            table_name=env.get(ENV_PREFIX + "TABLE_NAME") or None,
        ).validate()
