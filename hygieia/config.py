"""
Runtime configuration for Hygieia.

Settings come from environment variables so the CLI and the server share them.
"""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

DEFAULT_KB_PATH = Path(__file__).parent.parent / "knowledge" / "conditions" / "conditions.yaml"


class HygieiaConfig:
  """Configuration read from HYGIEIA_* environment variables."""

  def __init__(self):
    kb_path = os.environ.get("HYGIEIA_KB_PATH")
    self.kb_path = Path(kb_path) if kb_path else DEFAULT_KB_PATH
    self.log_level = os.environ.get("HYGIEIA_LOG_LEVEL", "WARNING").upper()
    self.max_results = self._int_env("HYGIEIA_MAX_RESULTS", 8)
    self.min_confidence = self._int_env("HYGIEIA_MIN_CONFIDENCE", 10)

  @staticmethod
  def _int_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
      return default
    try:
      return int(raw)
    except ValueError:
      raise ValueError(f"{name} must be an integer, got {raw!r}")

  def validate(self) -> None:
    """Raise error if settings are out of range."""
    if self.max_results < 1:
      raise ValueError("HYGIEIA_MAX_RESULTS must be at least 1")
    if not 0 <= self.min_confidence <= 95:
      raise ValueError("HYGIEIA_MIN_CONFIDENCE must be between 0 and 95")


@lru_cache()
def get_config() -> HygieiaConfig:
  """Get cached configuration instance."""
  config = HygieiaConfig()
  config.validate()
  return config


def configure_logging(level: Optional[str] = None) -> None:
  """Route log output through rich for terminal use."""
  logging.basicConfig(
    level=(level or get_config().log_level).upper(),
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)],
  )
