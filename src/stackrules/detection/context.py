"""Framework / language detection over the merged dependency table."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from stackrules.detection.version import parse_major
from stackrules.schemas.context import Language, ProjectContext

logger = logging.getLogger(__name__)

# Any of these marks a uni-app (cross-platform mini-program / app) project.
UNI_APP_PACKAGES = (
    "@dcloudio/uni-app",
    "@dcloudio/uni-h5",
    "@dcloudio/uni-app-plus",
    "@dcloudio/uni-mp-weixin",
    "@dcloudio/vite-plugin-uni",
)

# uni-app builds on Vue 2 unless the manifest pins Vue 3.
UNI_APP_DEFAULT_VUE_MAJOR = 2

# Ordered: the first keyword found in any script wins, so the specific
# mini-program targets are checked before the short "h5" token.
PLATFORM_KEYWORDS: tuple[tuple[str, str], ...] = (
    ("mp-weixin", "微信小程序"),
    ("mp-alipay", "支付宝小程序"),
    ("mp-baidu", "百度小程序"),
    ("mp-toutiao", "抖音小程序"),
    ("mp-qq", "QQ 小程序"),
    ("mp-kuaishou", "快手小程序"),
    ("mp-jd", "京东小程序"),
    ("quickapp-webview", "快应用"),
    ("app-plus", "App"),
    ("h5", "H5"),
)


def is_typescript(deps: Mapping[str, str], *, tsconfig_exists: bool = False) -> bool:
    return "typescript" in deps or tsconfig_exists


def detect_platform(scripts: Mapping[str, str] | None) -> tuple[str, str] | None:
    """Return ``(keyword, display name)`` of the first build target named in scripts."""
    if not scripts:
        return None
    haystack = "\n".join(f"{name} {command}" for name, command in scripts.items())
    for keyword, display_name in PLATFORM_KEYWORDS:
        if keyword in haystack:
            return keyword, display_name
    return None


def detect_context(
    deps: Mapping[str, str],
    *,
    scripts: Mapping[str, str] | None = None,
    tsconfig_exists: bool = False,
) -> ProjectContext:
    """Decide the project's framework identity, major version and language.

    uni-app is checked first because those projects also depend on ``vue``;
    then ``vue``, then ``react``.  Anything else is ``unknown`` with major 0.
    """
    language: Language = (
        "TypeScript" if is_typescript(deps, tsconfig_exists=tsconfig_exists) else "JavaScript"
    )

    if any(name in deps for name in UNI_APP_PACKAGES):
        major = parse_major(deps["vue"]) if "vue" in deps else UNI_APP_DEFAULT_VUE_MAJOR
        platform = detect_platform(scripts)
        ctx = ProjectContext(
            framework="uni-app",
            major=major,
            language=language,
            platform=platform[0] if platform else None,
            platform_name=platform[1] if platform else None,
        )
    elif "vue" in deps:
        ctx = ProjectContext(framework="vue", major=parse_major(deps["vue"]), language=language)
    elif "react" in deps:
        ctx = ProjectContext(framework="react", major=parse_major(deps["react"]), language=language)
    else:
        ctx = ProjectContext(framework="unknown", major=0, language=language)

    logger.debug("Detected context: %s", ctx)
    return ctx
