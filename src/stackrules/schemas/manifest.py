"""Pydantic model for the subset of package.json the detectors read."""

from pydantic import BaseModel, ConfigDict, field_validator


class PackageManifest(BaseModel):
    """A frontend project's package.json.

    Only the dependency tables and run scripts matter for detection; every
    other key is accepted and ignored.
    """

    model_config = ConfigDict(extra="ignore")

    dependencies: dict[str, str] = {}
    devDependencies: dict[str, str] = {}  # noqa: N815 - mirrors the package.json key
    scripts: dict[str, str] = {}

    @field_validator("dependencies", "devDependencies", "scripts", mode="before")
    @classmethod
    def null_table_is_empty(cls, v: object) -> object:
        """``"dependencies": null`` is treated like a missing table."""
        if v is None:
            return {}
        return v
