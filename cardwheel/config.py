"""
configuration constants for cardwheel.

all the magic numbers live here so they're easy to tweak.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass
class Config:
    """game configuration — tweak these as needed."""

    # max suggestions shown under the guess box
    suggestion_limit: int = 15

    # guesses this close to the answer get an exact position
    near_window: int = 5

    # timezone for day boundaries (the browser game used the UTC date)
    day_boundary_tz: str = "UTC"

    # paths (relative to project root by default)
    data_dir: Path = Path("data")
    catalog_file: str = "cards.json"

    def __post_init__(self):
        """ensure paths are Path objects."""
        self.data_dir = Path(self.data_dir)

    @property
    def catalog_path(self) -> Path:
        return self.data_dir / self.catalog_file


# default config instance
DEFAULT_CONFIG = Config()
