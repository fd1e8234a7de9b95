"""Tests for framework / language / platform detection."""

import pytest
from pydantic import ValidationError

from stackrules.detection.context import detect_context, detect_platform, is_typescript
from stackrules.schemas.context import ProjectContext


class TestDetectContext:

    def test_vue3_with_tsconfig(self) -> None:
        ctx = detect_context({"vue": "^3.4.0"}, tsconfig_exists=True)
        assert ctx.framework == "vue"
        assert ctx.major == 3
        assert ctx.language == "TypeScript"

    def test_vue2_javascript(self) -> None:
        ctx = detect_context({"vue": "^2.6.14"})
        assert (ctx.framework, ctx.major, ctx.language) == ("vue", 2, "JavaScript")

    def test_react(self) -> None:
        ctx = detect_context({"react": "^18.2.0", "react-dom": "^18.2.0"})
        assert (ctx.framework, ctx.major) == ("react", 18)

    def test_vue_takes_priority_over_react(self) -> None:
        ctx = detect_context({"react": "^18.2.0", "vue": "^3.0.0"})
        assert ctx.framework == "vue"

    def test_unknown(self) -> None:
        ctx = detect_context({"lodash": "^4.17.21"})
        assert ctx.framework == "unknown"
        assert ctx.major == 0
        assert ctx.platform is None

    def test_typescript_dependency_sets_language(self) -> None:
        ctx = detect_context({"react": "^18.2.0", "typescript": "^5.0.0"})
        assert ctx.language == "TypeScript"

    def test_non_uni_app_has_no_platform(self) -> None:
        ctx = detect_context({"vue": "^3.0.0"}, scripts={"dev:mp-weixin": "uni -p mp-weixin"})
        assert ctx.platform is None
        assert ctx.platform_name is None


class TestUniApp:

    def test_detected_before_vue(self) -> None:
        ctx = detect_context({"@dcloudio/uni-app": "3.0.0-alpha", "vue": "^3.2.45"})
        assert ctx.framework == "uni-app"
        assert ctx.major == 3

    def test_defaults_to_vue2_without_vue_dependency(self) -> None:
        ctx = detect_context({"@dcloudio/uni-app": "^2.0.2"})
        assert ctx.framework == "uni-app"
        assert ctx.major == 2

    @pytest.mark.parametrize(
        "package",
        ["@dcloudio/uni-h5", "@dcloudio/uni-app-plus", "@dcloudio/uni-mp-weixin", "@dcloudio/vite-plugin-uni"],
    )
    def test_any_marker_package(self, package: str) -> None:
        assert detect_context({package: "*"}).framework == "uni-app"

    def test_platform_from_scripts(self) -> None:
        ctx = detect_context(
            {"@dcloudio/uni-app": "*", "vue": "^3.2.0"},
            scripts={"dev:mp-weixin": "uni -p mp-weixin", "build:h5": "uni build"},
        )
        assert ctx.platform == "mp-weixin"
        assert ctx.platform_name == "微信小程序"

    def test_no_platform_when_scripts_silent(self) -> None:
        ctx = detect_context({"@dcloudio/uni-app": "*"}, scripts={"lint": "eslint ."})
        assert ctx.platform is None
        assert ctx.platform_name is None


class TestDetectPlatform:

    def test_none_without_scripts(self) -> None:
        assert detect_platform(None) is None
        assert detect_platform({}) is None

    def test_matches_command_text(self) -> None:
        assert detect_platform({"serve": "uni -p app-plus"}) == ("app-plus", "App")

    def test_table_order_wins_over_script_order(self) -> None:
        scripts = {"dev:h5": "uni", "dev:mp-alipay": "uni -p mp-alipay"}
        assert detect_platform(scripts) == ("mp-alipay", "支付宝小程序")

    def test_h5(self) -> None:
        assert detect_platform({"dev:h5": "uni"}) == ("h5", "H5")


class TestIsTypescript:

    def test_dependency(self) -> None:
        assert is_typescript({"typescript": "^5.0.0"})

    def test_tsconfig(self) -> None:
        assert is_typescript({}, tsconfig_exists=True)

    def test_neither(self) -> None:
        assert not is_typescript({"vue": "^3.0.0"})


class TestProjectContextModel:

    def test_frozen(self) -> None:
        ctx = ProjectContext(framework="vue", major=3)
        with pytest.raises(ValidationError):
            ctx.major = 2

    def test_rejects_unknown_framework(self) -> None:
        with pytest.raises(ValidationError):
            ProjectContext(framework="svelte")

    def test_rejects_negative_major(self) -> None:
        with pytest.raises(ValidationError):
            ProjectContext(framework="vue", major=-1)
