"""Grid configuration.

``GridConfig`` fixes the maximum extent a :class:`gridwalk.state.GridState`
may be configured to, and whether unchecked accessors verify their
coordinates (``checked``). Values may be read from the environment with
:meth:`GridConfig.from_env`.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_MAX_WIDTH = 1024
DEFAULT_MAX_HEIGHT = 1024

ENV_MAX_WIDTH = "GRIDWALK_MAX_WIDTH"
ENV_MAX_HEIGHT = "GRIDWALK_MAX_HEIGHT"
ENV_CHECKED = "GRIDWALK_CHECKED"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class GridConfig:
    """Static limits for a grid.

    Attributes:
        max_width: Largest width ``configure`` accepts; also the default width.
        max_height: Largest height ``configure`` accepts; also the default height.
        checked: If True, unchecked accessors abort via ``panic`` on an
            invalid coordinate instead of indexing blindly.
    """

    max_width: int = DEFAULT_MAX_WIDTH
    max_height: int = DEFAULT_MAX_HEIGHT
    checked: bool = False

    def __post_init__(self) -> None:
        if self.max_width <= 0 or self.max_height <= 0:
            raise ValueError(
                f"Maximum extent must be positive, got {self.max_width}x{self.max_height}"
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GridConfig":
        """Build a config from ``GRIDWALK_*`` environment variables.

        Missing variables fall back to the defaults.
        """
        env = os.environ if environ is None else environ
        return cls(
            max_width=int(env.get(ENV_MAX_WIDTH, DEFAULT_MAX_WIDTH)),
            max_height=int(env.get(ENV_MAX_HEIGHT, DEFAULT_MAX_HEIGHT)),
            checked=env.get(ENV_CHECKED, "").strip().lower() in _TRUTHY,
        )


DEFAULT_CONFIG = GridConfig()
