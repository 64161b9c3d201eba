"""Unified settings — CLI flags and environment variables in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``ATLASLINT_*`` prefix, plus the GitHub Actions
                    runner variables read through aliases
  3. Code defaults

The validation rules themselves are not configurable; these settings only
shape how results are presented.
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings


class AtlasSettings(BaseSettings):
    """Settings for the atlaslint CLI, frozen after construction.

    Attributes:
        github_actions: True when running inside a GitHub Actions job
            (``GITHUB_ACTIONS=true``). Enables workflow annotations.
        annotation_path: Path reported in annotations instead of the
            resolved input path (``GITHUB_ACTION_FILE_PATH``).
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ATLASLINT_",
        "populate_by_name": True,
    }

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    no_color: bool = False

    # --- CI environment ---
    github_actions: bool = Field(
        default=False,
        validation_alias=AliasChoices(
            "github_actions", "GITHUB_ACTIONS", "ATLASLINT_GITHUB_ACTIONS"
        ),
    )
    annotation_path: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "annotation_path", "GITHUB_ACTION_FILE_PATH", "ATLASLINT_ANNOTATION_PATH"
        ),
    )

    @field_validator("github_actions", mode="before")
    @classmethod
    def _only_literal_true(cls, value: Any) -> bool:
        # Runners set the literal "true"; anything else, empty included, is off.
        if isinstance(value, bool):
            return value
        return value == "true"

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> AtlasSettings:
        """Construct settings from a CLI invocation.

        Flags left at their falsy default are dropped so environment
        variables can still supply them.
        """
        overrides = {key: value for key, value in cli_flags.items() if value}
        return cls(**overrides)
