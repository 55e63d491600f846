from pydantic import BaseModel, Field


class GenerateRequest(BaseModel):
    topic: str = Field(..., description="Video idea to build a publishing plan for.")
    audience: str = Field(default="", description="Optional target audience.")
    category: str | None = Field(
        default=None,
        description="Category member name (e.g. TECH) or its label; defaults to TECH.",
    )


class CategoryOut(BaseModel):
    name: str
    label: str
