"""Capability detectors — UI library, bundler, CSS, state and HTTP client.

Each detector walks an ordered rule table; the first rule whose package is
in the dependency table produces the label, and ``None`` means the category
is absent from the fingerprint.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass

from stackrules.detection.version import parse_major
from stackrules.schemas.context import ProjectContext

# Major version of a scaffolding tool from which it bundles webpack 5.
WEBPACK5_SCAFFOLD_MAJOR = 5


@dataclass(frozen=True)
class Rule:
    """Packages that trigger a label; ``label`` receives the matched version spec."""

    packages: tuple[str, ...]
    label: Callable[[str], str]


def _with_major(name: str) -> Callable[[str], str]:
    """``name`` plus the major version, or bare ``name`` when it is unknown."""
    return lambda spec: f"{name}{parse_major(spec) or ''}"


def _always_major(name: str) -> Callable[[str], str]:
    return lambda spec: f"{name}{parse_major(spec)}"


def _fixed(label: str) -> Callable[[str], str]:
    return lambda _spec: label


def _implied_webpack(spec: str) -> str:
    return "webpack5" if parse_major(spec) >= WEBPACK5_SCAFFOLD_MAJOR else "webpack4"


UI_RULES: tuple[Rule, ...] = (
    Rule(("element-plus",), _with_major("element-plus")),
    Rule(("element-ui",), _with_major("element-ui")),
    Rule(("ant-design-vue",), _with_major("ant-design-vue")),
    Rule(("antd",), _with_major("antd")),
    Rule(("vant",), _with_major("vant")),
)

BUNDLER_RULES: tuple[Rule, ...] = (
    Rule(("vite",), _always_major("vite")),
    Rule(("webpack",), _always_major("webpack")),
    # Vue CLI 4 ships webpack 4, Vue CLI 5 ships webpack 5
    Rule(("@vue/cli-service",), _implied_webpack),
    # CRA: react-scripts 5 ships webpack 5
    Rule(("react-scripts",), _implied_webpack),
)

CSS_RULES: tuple[Rule, ...] = (
    Rule(("tailwindcss",), _fixed("tailwind")),
    Rule(("less",), _fixed("less")),
    Rule(("sass", "node-sass"), _fixed("sass")),
    Rule(("stylus",), _fixed("stylus")),
)

STATE_RULES: tuple[Rule, ...] = (
    Rule(("pinia",), _with_major("pinia")),
    Rule(("vuex",), _with_major("vuex")),
    Rule(("redux", "@reduxjs/toolkit"), _fixed("redux")),
    Rule(("zustand",), _with_major("zustand")),
)

EXPLICIT_HTTP_RULES: tuple[Rule, ...] = (
    Rule(("axios",), _fixed("axios")),
)

QUERY_HTTP_RULES: tuple[Rule, ...] = (
    Rule(
        ("@tanstack/query", "@tanstack/react-query", "@tanstack/vue-query", "react-query"),
        _fixed("react-query"),
    ),
)

UNI_REQUEST_LABEL = "uni.request"
FALLBACK_CSS_LABEL = "css"
FALLBACK_HTTP_LABEL = "fetch"


def first_match(rules: Sequence[Rule], deps: Mapping[str, str]) -> str | None:
    """Evaluate ``rules`` top to bottom and return the first label produced."""
    for rule in rules:
        for package in rule.packages:
            if package in deps:
                return rule.label(deps[package] or "")
    return None


def detect_ui_library(deps: Mapping[str, str]) -> str | None:
    return first_match(UI_RULES, deps)


def detect_bundler(deps: Mapping[str, str]) -> str | None:
    return first_match(BUNDLER_RULES, deps)


def detect_css_solution(deps: Mapping[str, str]) -> str:
    return first_match(CSS_RULES, deps) or FALLBACK_CSS_LABEL


def detect_state_solution(deps: Mapping[str, str]) -> str | None:
    return first_match(STATE_RULES, deps)


def detect_http_client(deps: Mapping[str, str], ctx: ProjectContext) -> str:
    """Pick the HTTP client label.

    An explicit library always wins.  uni-app projects otherwise use the
    platform-native ``uni.request``; everything else falls back through the
    query library to plain ``fetch``.
    """
    explicit = first_match(EXPLICIT_HTTP_RULES, deps)
    if explicit:
        return explicit
    if ctx.framework == "uni-app":
        return UNI_REQUEST_LABEL
    return first_match(QUERY_HTTP_RULES, deps) or FALLBACK_HTTP_LABEL
