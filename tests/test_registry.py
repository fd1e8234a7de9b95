"""Tests for the documentation registry lookup."""

import pytest

from stackrules.docs.registry import DOC_REGISTRY, build_doc_list, lookup, parse_segment
from stackrules.schemas.fingerprint import TechFingerprint


class TestParseSegment:

    @pytest.mark.parametrize(
        ("segment", "expected"),
        [
            ("vue3", ("vue", 3)),
            ("react18", ("react", 18)),
            ("element-ui2", ("element-ui", 2)),
            ("ant-design-vue3", ("ant-design-vue", 3)),
            ("uni-app(vue3)", ("uni-app", 3)),
            ("axios", ("axios", 1)),
        ],
    )
    def test_recovers_name_and_major(self, segment: str, expected: tuple[str, int]) -> None:
        assert parse_segment(segment) == expected

    @pytest.mark.parametrize("segment", ["platform:mp-weixin", "platform:h5", "tailwind", "css", "fetch", "uni.request", ""])
    def test_unparseable_or_skipped(self, segment: str) -> None:
        assert parse_segment(segment) is None


class TestBuildDocList:

    def test_vite4_single_line(self) -> None:
        lines = build_doc_list("vite4")
        assert lines == [f"- vite@4: {DOC_REGISTRY['vite'][4]}"]

    def test_unknown_major_dropped(self) -> None:
        assert build_doc_list("vite2") == []

    def test_unknown_library_dropped(self) -> None:
        assert build_doc_list("zustand4") == []

    def test_follows_fingerprint_order(self) -> None:
        lines = build_doc_list("vue2 + element-ui2 + vite4 + tailwind + pinia2 + axios")
        names = [line.split(":")[0] for line in lines]
        assert names == ["- vue@2", "- element-ui@2", "- vite@4", "- pinia@2", "- axios@1"]

    def test_uni_app_segments(self) -> None:
        lines = build_doc_list("uni-app(vue3) + platform:mp-weixin + sass + uni.request")
        assert len(lines) == 1
        assert lines[0].startswith("- uni-app@3: https://uniapp.dcloud.net.cn/")

    def test_accepts_model(self) -> None:
        fp = TechFingerprint(framework="react18", http="fetch")
        assert build_doc_list(fp) == ["- react@18: https://react.dev/reference/react"]

    def test_react_without_registered_major(self) -> None:
        assert build_doc_list("react17 + css + fetch") == []


class TestRegistry:

    def test_lookup(self) -> None:
        assert lookup("webpack", 5) == "https://webpack.js.org/concepts/"
        assert lookup("webpack", 3) is None
        assert lookup("svelte", 4) is None

    def test_read_only(self) -> None:
        with pytest.raises(TypeError):
            DOC_REGISTRY["svelte"] = {4: "https://svelte.dev"}  # type: ignore[index]
        with pytest.raises(TypeError):
            DOC_REGISTRY["vue"][4] = "https://example.com"  # type: ignore[index]
