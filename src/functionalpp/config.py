"""Configuration for join and range defaults."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

ENV_PREFIX = "FUNCTIONALPP_"


class FunctionalConfig(BaseModel):
    """Immutable defaults consulted by join() and Chain.

    Attributes:
        delimiter: Default separator for join().
        legacy_join: When True, join() of a single element returns ""
            instead of that element's text.
        range_step: Default step for Chain.range(); must be positive.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    delimiter: str = ","
    legacy_join: bool = False
    range_step: int = Field(default=1, gt=0)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> FunctionalConfig:
        """Build a config from FUNCTIONALPP_* environment variables.

        Unset variables keep their defaults. Invalid values raise
        pydantic.ValidationError.
        """
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}

        if f"{ENV_PREFIX}DELIMITER" in env:
            values["delimiter"] = env[f"{ENV_PREFIX}DELIMITER"]
        if f"{ENV_PREFIX}LEGACY_JOIN" in env:
            values["legacy_join"] = env[f"{ENV_PREFIX}LEGACY_JOIN"].strip()
        if f"{ENV_PREFIX}RANGE_STEP" in env:
            values["range_step"] = env[f"{ENV_PREFIX}RANGE_STEP"]

        return cls.model_validate(values)


DEFAULT_CONFIG = FunctionalConfig()
