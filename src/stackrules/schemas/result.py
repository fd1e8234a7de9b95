"""Pydantic model for the outcome of one generation run."""

from pathlib import Path

from pydantic import BaseModel

from stackrules.schemas.context import ProjectContext
from stackrules.schemas.fingerprint import TechFingerprint


class GenerationResult(BaseModel):
    """Everything derived from one manifest, plus where the document went."""

    context: ProjectContext
    fingerprint: TechFingerprint
    document: str
    doc_lines: list[str] = []
    output_path: Path
    written: bool = False
