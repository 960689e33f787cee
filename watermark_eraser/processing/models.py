from dataclasses import dataclass


@dataclass(frozen=True)
class InlineData:
    """Binary content embedded in a provider response, base64 encoded."""

    mime_type: str
    data: str


@dataclass(frozen=True)
class ContentPart:
    """One discrete unit (text or binary) of a provider response."""

    text: str | None = None
    inline_data: InlineData | None = None

    @property
    def has_image(self) -> bool:
        return self.inline_data is not None and bool(self.inline_data.data)
