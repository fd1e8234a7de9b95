"""Rules document builder — renders the .cursorrules text from the detected stack."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from stackrules.docs.registry import build_doc_list
from stackrules.schemas.context import ProjectContext
from stackrules.schemas.fingerprint import TechFingerprint

_TEMPLATE_DIR = Path(__file__).parent / "templates"

# Section order of the finished document.  The framework block slots in
# between the general quality rules and the project context.
_LEADING_SECTIONS = ("role.md.j2", "l0_core.md.j2", "l1_quality.md.j2")
_TRAILING_SECTIONS = (
    "l2_context.md.j2",
    "l3_style.md.j2",
    "l4_docs.md.j2",
    "l5_reference.md.j2",
)


def _environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(_TEMPLATE_DIR)),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )


def framework_template(ctx: ProjectContext) -> str | None:
    """Template name of the framework-specific block, if the framework has one."""
    if ctx.framework == "uni-app":
        return "framework/uni_app.md.j2"
    if ctx.framework == "vue" and ctx.major == 2:
        return "framework/vue2.md.j2"
    if ctx.framework == "vue" and ctx.major >= 3:
        return "framework/vue3.md.j2"
    if ctx.framework == "react":
        return "framework/react.md.j2"
    return None


def render_rules_document(
    ctx: ProjectContext,
    fingerprint: TechFingerprint,
    *,
    doc_lines: list[str] | None = None,
) -> str:
    """Render the full rules document.

    Each section template is rendered and stripped on its own, then the
    non-empty sections are joined with one blank line.  ``doc_lines`` defaults
    to the registry lookup for ``fingerprint``.
    """
    env = _environment()
    if doc_lines is None:
        doc_lines = build_doc_list(fingerprint)

    variables = {
        "language": ctx.language,
        "is_typescript": ctx.is_typescript,
        "framework": ctx.framework,
        "major": ctx.major,
        "platform": ctx.platform,
        "platform_name": ctx.platform_name,
        "fingerprint": fingerprint.text,
        "doc_lines": doc_lines,
    }

    names: list[str] = list(_LEADING_SECTIONS)
    framework_block = framework_template(ctx)
    if framework_block:
        names.append(framework_block)
    names.extend(_TRAILING_SECTIONS)

    sections: list[str] = []
    for name in names:
        rendered = env.get_template(name).render(**variables).strip()
        if rendered:
            sections.append(rendered)

    return "\n\n".join(sections)
