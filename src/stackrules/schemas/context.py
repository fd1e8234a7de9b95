"""Pydantic model for the detected project context."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Framework = Literal["vue", "react", "uni-app", "unknown"]
Language = Literal["TypeScript", "JavaScript"]


class ProjectContext(BaseModel):
    """Framework identity, major version and source language of a project.

    Exactly one is produced per run and it never changes afterwards.
    ``platform`` / ``platform_name`` are only set for uni-app projects whose
    run scripts name a build target.
    """

    model_config = ConfigDict(frozen=True)

    framework: Framework = "unknown"
    major: int = Field(default=0, ge=0)
    language: Language = "JavaScript"
    platform: str | None = None  # e.g. "mp-weixin"
    platform_name: str | None = None  # e.g. "微信小程序"

    @property
    def is_typescript(self) -> bool:
        return self.language == "TypeScript"
