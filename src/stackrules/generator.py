"""Generation pipeline — manifest in, rules document out."""

from __future__ import annotations

import logging
from pathlib import Path

from stackrules.detection.context import detect_context
from stackrules.detection.fingerprint import build_fingerprint
from stackrules.detection.manifest import merge_dependencies, read_manifest
from stackrules.docs.registry import build_doc_list
from stackrules.output.rules import render_rules_document
from stackrules.schemas.config import RulesConfig
from stackrules.schemas.result import GenerationResult

logger = logging.getLogger(__name__)


def generate_rules(root: str | Path = ".", config: RulesConfig | None = None) -> GenerationResult:
    """Detect the stack of the project at ``root`` and render its rules document.

    Nothing is written; see ``write_rules``.  Raises ``ManifestNotFoundError``
    or ``ManifestError`` when package.json is missing or unreadable.
    """
    root = Path(root)
    config = config or RulesConfig()

    manifest = read_manifest(root / config.manifest_path)
    deps = merge_dependencies(manifest.dependencies, manifest.devDependencies)

    tsconfig_exists = (root / config.tsconfig_path).exists()
    ctx = detect_context(deps, scripts=manifest.scripts, tsconfig_exists=tsconfig_exists)
    fingerprint = build_fingerprint(ctx, deps)
    doc_lines = build_doc_list(fingerprint)
    logger.debug("Resolved %d documentation link(s)", len(doc_lines))

    document = render_rules_document(ctx, fingerprint, doc_lines=doc_lines)

    return GenerationResult(
        context=ctx,
        fingerprint=fingerprint,
        document=document,
        doc_lines=doc_lines,
        output_path=root / config.output_path,
    )


def write_rules(result: GenerationResult) -> GenerationResult:
    """Write the rendered document, overwriting any existing file."""
    result.output_path.parent.mkdir(parents=True, exist_ok=True)
    result.output_path.write_text(result.document, encoding="utf-8")
    logger.info("Wrote %s (%d chars)", result.output_path, len(result.document))
    return result.model_copy(update={"written": True})
