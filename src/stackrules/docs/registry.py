"""Version-aware official documentation registry.

Maps each library to the documentation root of every major version the
rules document is allowed to cite.  Segments of the fingerprint are parsed
back into ``(library, major)`` pairs and looked up here; anything the
registry does not know is left out rather than guessed.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from types import MappingProxyType

from stackrules.detection.fingerprint import PLATFORM_PREFIX
from stackrules.schemas.fingerprint import DELIMITER, TechFingerprint

logger = logging.getLogger(__name__)


def _freeze(table: dict[str, dict[int, str]]) -> Mapping[str, Mapping[int, str]]:
    return MappingProxyType({name: MappingProxyType(dict(urls)) for name, urls in table.items()})


DOC_REGISTRY: Mapping[str, Mapping[int, str]] = _freeze(
    {
        "vue": {
            2: "https://v2.cn.vuejs.org/v2/guide/",
            3: "https://cn.vuejs.org/guide/introduction.html",
        },
        "react": {
            18: "https://react.dev/reference/react",
            19: "https://react.dev/reference/react",
        },
        "uni-app": {
            2: "https://uniapp.dcloud.net.cn/tutorial/",
            3: "https://uniapp.dcloud.net.cn/tutorial/",
        },
        "antd": {
            4: "https://4x.ant.design/components/overview-cn/",
            5: "https://ant.design/components/overview-cn/",
        },
        "ant-design-vue": {
            1: "https://1x.antdv.com/docs/vue/introduce-cn/",
            2: "https://2x.antdv.com/docs/vue/introduce-cn/",
            3: "https://www.antdv.com/components/overview-cn",
        },
        "element-ui": {
            2: "https://element.eleme.io/#/zh-CN/component/quickstart",
        },
        "element-plus": {
            2: "https://element-plus.org/zh-CN/component/overview.html",
        },
        "vant": {
            2: "https://vant-ui.github.io/vant/v2/#/zh-CN/",
            3: "https://vant-ui.github.io/vant/v3/#/zh-CN/",
            4: "https://vant-ui.github.io/vant/#/zh-CN/",
        },
        "webpack": {
            4: "https://v4.webpack.js.org/concepts/",
            5: "https://webpack.js.org/concepts/",
        },
        "vite": {
            4: "https://vitejs.dev/guide/",
            5: "https://vitejs.dev/guide/",
        },
        "pinia": {
            2: "https://pinia.vuejs.org/zh/introduction.html",
            3: "https://pinia.vuejs.org/zh/introduction.html",
        },
        "vuex": {
            3: "https://v3.vuex.vuejs.org/zh/",
            4: "https://vuex.vuejs.org/zh/",
        },
        "axios": {
            1: "https://axios-http.com/docs/intro",
        },
    }
)

# The axios label never carries a version; its docs are keyed on 1.x.
_DEFAULT_MAJOR = MappingProxyType({"axios": 1})

_NAME_WITH_MAJOR = re.compile(r"^([A-Za-z.-]+?)(\d+)$")
# uni-app(vue3) -> ("uni-app", 3); also accepts a bare number: name(3)
_NAME_WITH_PAREN_MAJOR = re.compile(r"^([A-Za-z.-]+)\((?:[A-Za-z]+)?(\d+)\)$")


def parse_segment(segment: str) -> tuple[str, int] | None:
    """Recover ``(library, major)`` from one fingerprint segment, or ``None``."""
    segment = segment.strip()
    if not segment or segment.startswith(PLATFORM_PREFIX):
        return None
    if segment in _DEFAULT_MAJOR:
        return segment, _DEFAULT_MAJOR[segment]
    match = _NAME_WITH_PAREN_MAJOR.match(segment) or _NAME_WITH_MAJOR.match(segment)
    if match is None:
        return None
    return match.group(1), int(match.group(2))


def lookup(name: str, major: int) -> str | None:
    return DOC_REGISTRY.get(name, {}).get(major)


def build_doc_list(fingerprint: TechFingerprint | str) -> list[str]:
    """One ``- name@major: url`` line per fingerprint segment the registry knows."""
    text = fingerprint.text if isinstance(fingerprint, TechFingerprint) else fingerprint
    lines: list[str] = []
    for segment in text.split(DELIMITER):
        parsed = parse_segment(segment)
        if parsed is None:
            continue
        name, major = parsed
        url = lookup(name, major)
        if url is None:
            logger.debug("No documentation registered for %s@%d", name, major)
            continue
        lines.append(f"- {name}@{major}: {url}")
    return lines
