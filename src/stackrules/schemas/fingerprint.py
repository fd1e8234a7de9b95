"""Pydantic model for the architecture-level tech fingerprint."""

from pydantic import BaseModel, ConfigDict

DELIMITER = " + "


class TechFingerprint(BaseModel):
    """Stack labels per category: framework, platform, UI, bundler, CSS, state, HTTP.

    Absent categories are ``None`` and never appear in ``labels``.  CSS always
    has a value because its detector falls back to plain ``css``.
    """

    model_config = ConfigDict(frozen=True)

    framework: str | None = None  # "vue3", "react18", "uni-app(vue3)"
    platform: str | None = None  # "platform:mp-weixin"
    ui: str | None = None
    bundler: str | None = None
    css: str = "css"
    state: str | None = None
    http: str | None = None

    @property
    def labels(self) -> list[str]:
        """Present labels in fingerprint order, first occurrence wins."""
        ordered = [
            self.framework,
            self.platform,
            self.ui,
            self.bundler,
            self.css,
            self.state,
            self.http,
        ]
        labels: list[str] = []
        for label in ordered:
            if label and label not in labels:
                labels.append(label)
        return labels

    @property
    def text(self) -> str:
        return DELIMITER.join(self.labels)

    def __str__(self) -> str:
        return self.text
