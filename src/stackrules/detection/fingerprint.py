"""Tech fingerprint assembly from the context and capability detectors."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from stackrules.detection.capabilities import (
    detect_bundler,
    detect_css_solution,
    detect_http_client,
    detect_state_solution,
    detect_ui_library,
)
from stackrules.schemas.context import ProjectContext
from stackrules.schemas.fingerprint import TechFingerprint

logger = logging.getLogger(__name__)

PLATFORM_PREFIX = "platform:"


def framework_label(ctx: ProjectContext) -> str | None:
    """``vue3`` / ``react18`` / ``uni-app(vue3)``; ``None`` for unknown projects."""
    match ctx.framework:
        case "vue":
            return f"vue{ctx.major}"
        case "react":
            return f"react{ctx.major}"
        case "uni-app":
            return f"uni-app(vue{ctx.major})"
        case _:
            return None


def platform_label(ctx: ProjectContext) -> str | None:
    if ctx.framework != "uni-app" or not ctx.platform:
        return None
    return f"{PLATFORM_PREFIX}{ctx.platform}"


def build_fingerprint(ctx: ProjectContext, deps: Mapping[str, str]) -> TechFingerprint:
    fingerprint = TechFingerprint(
        framework=framework_label(ctx),
        platform=platform_label(ctx),
        ui=detect_ui_library(deps),
        bundler=detect_bundler(deps),
        css=detect_css_solution(deps),
        state=detect_state_solution(deps),
        http=detect_http_client(deps, ctx),
    )
    logger.debug("Fingerprint: %s", fingerprint.text)
    return fingerprint
