"""Configuration schema — validates .stackrules.yml."""

from pydantic import BaseModel, ConfigDict, field_validator


class RulesConfig(BaseModel):
    """Project-relative paths used by a generation run.

    The defaults reproduce the fixed layout of a plain frontend project, so a
    repository without ``.stackrules.yml`` needs no configuration at all.
    """

    model_config = ConfigDict(extra="forbid")

    manifest_path: str = "package.json"
    tsconfig_path: str = "tsconfig.json"
    output_path: str = ".cursorrules"

    @field_validator("manifest_path", "tsconfig_path", "output_path")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("path must not be empty")
        return v
