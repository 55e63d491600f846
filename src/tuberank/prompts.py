from dataclasses import dataclass
from typing import Any

from tuberank.schemas import GenerationRequest

RESPONSE_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "titles": {
            "type": "array",
            "items": {"type": "string"},
            "description": "Exactly 5 high-CTR video titles optimized for YouTube search and recommendations.",
        },
        "description": {
            "type": "string",
            "description": (
                "Formatted YouTube description: a strong hook in the first 2 lines, a 'Question of the Day' "
                "to drive comments, a clear subscribe call-to-action, and placeholders for timestamps and "
                "social links."
            ),
        },
        "keywords": {
            "type": "array",
            "items": {"type": "string"},
            "description": "20-30 high-volume, low-competition tags mixing broad and long-tail terms.",
        },
        "hashtags": {
            "type": "array",
            "items": {"type": "string"},
            "description": "5-10 trending, relevant hashtags, each including the # symbol.",
        },
        "category": {
            "type": "string",
            "description": "The most appropriate YouTube category for this video.",
        },
        "algorithmStrategy": {
            "type": "string",
            "description": (
                "Brief analysis of why this content works with the current algorithm: retention, "
                "click-through rate and engagement signals."
            ),
        },
        "thumbnailIdeas": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "description": {
                        "type": "string",
                        "description": "Visual scene of the thumbnail: subject, facial expression, colors, background.",
                    },
                    "text": {
                        "type": "string",
                        "description": "Short punchy overlay text, 3-5 words at most.",
                    },
                },
                "required": ["description", "text"],
                "additionalProperties": False,
            },
            "description": "Exactly 3 distinct thumbnail concepts that complement the titles.",
        },
    },
    "required": [
        "titles",
        "description",
        "keywords",
        "hashtags",
        "category",
        "algorithmStrategy",
        "thumbnailIdeas",
    ],
    "additionalProperties": False,
}


@dataclass(frozen=True)
class GenerationPrompt:
    instruction: str
    response_schema: dict[str, Any]


def build_instruction(request: GenerationRequest, language: str = "Arabic") -> str:
    return "\n".join(
        [
            "Act as a world-class YouTube SEO expert and content strategist.",
            "Generate a publishing strategy and metadata for a NEW YouTube video based on the following:",
            "",
            f"- Video idea: {request.topic}",
            f"- Niche/Category: {request.category.label}",
            f"- Target audience: {request.audience}",
            f"- Language: {language} (all output must be in {language})",
            "",
            "Follow current YouTube algorithm best practices:",
            "1. Titles: exactly 5 click-worthy titles under 60 characters that evoke curiosity or promise value.",
            "2. Description: engaging and professional, optimized for retention and conversion.",
            "   - First 2 lines: a strong hook that summarizes the video for search results.",
            "   - Body: explain the value of the video using the AIDA framework.",
            '   - Engagement: a specific "Question of the Day" that invites comments.',
            "   - CTA: a compelling call to subscribe and like the video.",
            '   - Structure: emojis, bullet points, clear spacing and a "Timestamps" placeholder section.',
            "3. Keywords: mix broad and long-tail tags relevant to the category.",
            "4. Strategy: explain how the algorithm should classify this content.",
            "5. Thumbnails: exactly 3 high-CTR thumbnail ideas, each with a short text overlay.",
            "",
            "Output strictly JSON matching the provided schema.",
        ]
    )


def build_prompt(request: GenerationRequest, language: str = "Arabic") -> GenerationPrompt:
    return GenerationPrompt(
        instruction=build_instruction(request, language),
        response_schema=RESPONSE_SCHEMA,
    )
