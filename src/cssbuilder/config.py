from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

ENV_PREFIX = "CSSBUILDER_"


@dataclass(frozen=True)
class CssBuilderConfig:
    log_level: str = "WARNING"
    log_format: str = "%(levelname)s %(name)s: %(message)s"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> CssBuilderConfig:
        """Load overrides from ``CSSBUILDER_LOG_LEVEL`` / ``CSSBUILDER_LOG_FORMAT``."""
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            log_level=env.get(f"{ENV_PREFIX}LOG_LEVEL", defaults.log_level).upper(),
            log_format=env.get(f"{ENV_PREFIX}LOG_FORMAT", defaults.log_format),
        )
