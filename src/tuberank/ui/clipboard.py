"""Exact strings placed on the clipboard by the copy affordances."""

from collections.abc import Sequence

from tuberank.schemas import GenerationResult, ThumbnailIdea


def title_text(title: str) -> str:
    return title


def description_text(result: GenerationResult) -> str:
    return result.description


def keywords_text(keywords: Sequence[str]) -> str:
    return ",".join(keywords)


def hashtags_text(hashtags: Sequence[str]) -> str:
    return " ".join(hashtags)


def thumbnail_text(idea: ThumbnailIdea) -> str:
    return idea.text
