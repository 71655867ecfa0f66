"""Document pipeline limits.

These values are fixed for the service and are not read from the
environment. Tests substitute them by passing a different instance.
"""

from pydantic import BaseModel, ConfigDict, Field


class PipelineConfig(BaseModel):
    """Limits applied while turning a document into prompt content.

    Attributes:
        page_cap: Maximum number of pages rendered or accepted as images.
        render_scale: Zoom factor for page rendering (1.0 = 72 DPI).
        max_text_chars: Extracted text is cut to this many characters.
        truncation_marker: Appended after a blank line when text is cut.
        document_label: Heading placed above the extracted text.
    """

    model_config = ConfigDict(frozen=True)

    page_cap: int = Field(default=6, ge=0)
    render_scale: float = Field(default=1.6, gt=0.0)
    max_text_chars: int = Field(default=12000, ge=1)
    truncation_marker: str = "[content truncated]"
    document_label: str = "document content (text extracted):"


def get_pipeline_config() -> PipelineConfig:
    """Return the service-wide pipeline limits."""
    return PipelineConfig()
