"""Request/response schemas for the HTTP API."""

from typing import Any

from pydantic import AliasChoices, BaseModel, Field, field_validator


class APIResponse(BaseModel):
    """Standard response envelope for all API endpoints."""

    success: bool
    data: Any | None = None
    error: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)


def _reject_blank(v: str) -> str:
    if not v.strip():
        raise ValueError("must not be blank")
    return v


class StyleComparisonRequest(BaseModel):
    """Request body for POST /api/style-comparison.

    camelCase keys are accepted for existing web clients.
    """

    user_sample_text: str = Field(
        min_length=1,
        validation_alias=AliasChoices(
            "user_sample_text", "userSampleText"
        ),
    )
    original_text: str = Field(
        min_length=1,
        validation_alias=AliasChoices("original_text", "originalText"),
    )
    paraphrased_text: str = Field(
        min_length=1,
        validation_alias=AliasChoices(
            "paraphrased_text", "paraphrasedText"
        ),
    )
    structured: bool = False

    @field_validator(
        "user_sample_text", "original_text", "paraphrased_text"
    )
    @classmethod
    def _not_blank(cls, v: str) -> str:
        return _reject_blank(v)

    def text_lengths(self) -> dict[str, int]:
        return {
            "user_sample_text": len(self.user_sample_text),
            "original_text": len(self.original_text),
            "paraphrased_text": len(self.paraphrased_text),
        }


class TextAnalysisRequest(BaseModel):
    """Request body for POST /api/style-analysis."""

    text: str = Field(min_length=1)

    @field_validator("text")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        return _reject_blank(v)


class StyleVerificationRequest(BaseModel):
    """Request body for POST /api/style-verification.

    Without a sample there is no style to check against.
    """

    output_text: str = Field(
        min_length=1,
        validation_alias=AliasChoices("output_text", "outputText"),
    )
    user_sample_text: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "user_sample_text", "userSampleText"
        ),
    )

    @field_validator("output_text")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        return _reject_blank(v)
