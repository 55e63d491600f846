import json

import pytest
from pydantic import ValidationError as SchemaValidationError

from tuberank.errors import DecodeError, EmptyResponseError, ServiceError
from tuberank.providers.llm.base import decode_result_text


def test_decode_valid_payload(result_payload) -> None:
    result = decode_result_text(json.dumps(result_payload, ensure_ascii=False))

    assert len(result.titles) == 5
    assert len(result.thumbnail_ideas) == 3
    assert result.algorithm_strategy == result_payload["algorithmStrategy"]
    assert result.to_wire() == result_payload


def test_decode_accepts_code_fence(result_payload) -> None:
    text = "```json\n" + json.dumps(result_payload) + "\n```"

    result = decode_result_text(text)

    assert result.thumbnail_ideas[2].text == "السر هنا"


def test_decode_prefixes_hashtags(result_payload) -> None:
    result_payload["hashtags"] = ["tech", " #gaming "]

    result = decode_result_text(json.dumps(result_payload))

    assert result.hashtags == ("#tech", "#gaming")


@pytest.mark.parametrize("blank", ["", "   ", "#"])
def test_blank_hashtag_is_decode_error(result_payload, blank) -> None:
    result_payload["hashtags"] = ["#ok", blank]

    with pytest.raises(DecodeError):
        decode_result_text(json.dumps(result_payload))


def test_decoded_result_cannot_be_mutated(result_payload) -> None:
    result = decode_result_text(json.dumps(result_payload))

    with pytest.raises(AttributeError):
        result.titles.append("sixth")  # type: ignore[attr-defined]
    with pytest.raises(AttributeError):
        result.thumbnail_ideas.pop()  # type: ignore[attr-defined]
    with pytest.raises(SchemaValidationError):
        result.titles = ()  # type: ignore[misc]

    assert len(result.titles) == 5
    assert len(result.thumbnail_ideas) == 3


@pytest.mark.parametrize("text", [None, "", "   \n"])
def test_empty_text_is_empty_response(text) -> None:
    with pytest.raises(EmptyResponseError):
        decode_result_text(text)


def test_empty_response_is_a_service_error() -> None:
    with pytest.raises(ServiceError):
        decode_result_text("")


def test_non_json_is_decode_error() -> None:
    with pytest.raises(DecodeError):
        decode_result_text("Sure! Here are your titles:")


def test_missing_field_is_decode_error(result_payload) -> None:
    del result_payload["algorithmStrategy"]

    with pytest.raises(DecodeError):
        decode_result_text(json.dumps(result_payload))


def test_wrong_title_count_is_decode_error(result_payload) -> None:
    result_payload["titles"] = result_payload["titles"][:4]

    with pytest.raises(DecodeError):
        decode_result_text(json.dumps(result_payload))


def test_wrong_thumbnail_shape_is_decode_error(result_payload) -> None:
    result_payload["thumbnailIdeas"][0] = {"description": "only a scene"}

    with pytest.raises(DecodeError):
        decode_result_text(json.dumps(result_payload))
