from pathlib import Path

from streamlit.testing.v1 import AppTest

from tuberank.errors import DecodeError, ServiceError
from tuberank.schemas import GenerationRequest, GenerationResult
from tuberank.service.controller import (
    EMPTY_TOPIC_MESSAGE,
    GENERATION_FAILED_MESSAGE,
    GenerationController,
    Phase,
)
from tuberank.ui.app import PENDING_KEY

APP_PATH = Path(__file__).resolve().parents[1] / "src" / "tuberank" / "ui" / "app.py"
SUBMIT_LABEL = "✨ تجهيز خطة النشر"
LOADING_LABEL = "⏳ جاري المعالجة..."


class _FakeClient:
    def __init__(self, result: GenerationResult | None = None, exc: Exception | None = None) -> None:
        self.result = result
        self.exc = exc
        self.calls: list[GenerationRequest] = []

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        self.calls.append(request)
        if self.exc is not None:
            raise self.exc
        assert self.result is not None
        return self.result


def _app(controller: GenerationController) -> AppTest:
    at = AppTest.from_file(str(APP_PATH), default_timeout=10)
    at.session_state["controller"] = controller
    return at.run()


def test_idle_form_has_enabled_submit() -> None:
    at = _app(GenerationController(_FakeClient()))

    assert len(at.button) == 1
    assert at.button[0].label == SUBMIT_LABEL
    assert at.button[0].disabled is False
    assert len(at.error) == 0
    assert len(at.code) == 0


def test_success_renders_every_panel(result_payload) -> None:
    result = GenerationResult.model_validate(result_payload)
    client = _FakeClient(result=result)
    at = _app(GenerationController(client))

    at.text_area(key="topic_input").input("أفضل هواتف للألعاب")
    at.button[0].click().run()

    assert len(client.calls) == 1
    assert client.calls[0].topic == "أفضل هواتف للألعاب"
    assert len(at.error) == 0
    assert at.button[0].disabled is False
    assert at.session_state[PENDING_KEY] is False

    codes = [block.value for block in at.code]
    # 3 thumbnails, 5 titles, description, keywords, hashtags
    assert len(codes) == 11
    assert codes[:3] == [idea["text"] for idea in result_payload["thumbnailIdeas"]]
    assert codes[3:8] == result_payload["titles"]
    assert codes[8] == result_payload["description"]
    assert codes[9] == ",".join(result_payload["keywords"])
    assert codes[10] == " ".join(result_payload["hashtags"])
    assert all(tag.startswith("#") for tag in codes[10].split(" "))
    assert len(at.info) == 1
    assert result_payload["algorithmStrategy"] in at.info[0].value


def test_failure_renders_single_banner_and_no_panels() -> None:
    for exc in (ServiceError("down"), DecodeError("bad json")):
        client = _FakeClient(exc=exc)
        at = _app(GenerationController(client))

        at.text_area(key="topic_input").input("topic")
        at.button[0].click().run()

        assert len(client.calls) == 1
        assert [banner.value for banner in at.error] == [GENERATION_FAILED_MESSAGE]
        assert len(at.code) == 0
        assert len(at.info) == 0


def test_empty_topic_shows_validation_banner_without_call() -> None:
    client = _FakeClient()
    at = _app(GenerationController(client))

    at.text_area(key="topic_input").input("   ")
    at.button[0].click().run()

    assert client.calls == []
    assert [banner.value for banner in at.error] == [EMPTY_TOPIC_MESSAGE]
    assert at.button[0].disabled is False


def test_submit_is_locked_while_generation_in_flight(result_payload) -> None:
    client = _FakeClient(result=GenerationResult.model_validate(result_payload))
    controller = GenerationController(client)
    controller.set_topic("topic")
    controller.loading = True
    controller.phase = Phase.LOADING
    at = _app(controller)

    assert at.button[0].disabled is True
    assert at.button[0].label == LOADING_LABEL

    at.button[0].click().run()

    assert client.calls == []
    assert PENDING_KEY not in at.session_state or at.session_state[PENDING_KEY] is False
    assert len(at.code) == 0
