from pydantic import BaseModel, ConfigDict, Field, field_validator

from tuberank.categories import DEFAULT_CATEGORY, VideoCategory


class GenerationRequest(BaseModel):
    topic: str = Field(..., min_length=1, description="Video idea, embedded verbatim in the instruction.")
    audience: str = Field(default="", description="Optional target audience.")
    category: VideoCategory = DEFAULT_CATEGORY


class ThumbnailIdea(BaseModel):
    model_config = ConfigDict(frozen=True)

    description: str
    text: str


class GenerationResult(BaseModel):
    """Publishing plan returned by the model.

    Attribute names are snake_case; the wire (model reply and HTTP output)
    uses the camelCase aliases.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    titles: tuple[str, ...] = Field(..., min_length=5, max_length=5)
    description: str
    keywords: tuple[str, ...]
    hashtags: tuple[str, ...]
    category: str
    algorithm_strategy: str = Field(..., alias="algorithmStrategy")
    thumbnail_ideas: tuple[ThumbnailIdea, ...] = Field(..., alias="thumbnailIdeas", min_length=3, max_length=3)

    @field_validator("hashtags")
    @classmethod
    def _prefix_hashtags(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        tags: list[str] = []
        for tag in value:
            stripped = tag.strip()
            if not stripped or stripped == "#":
                raise ValueError("hashtags must not be blank")
            tags.append(stripped if stripped.startswith("#") else f"#{stripped}")
        return tuple(tags)

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
