import logging

from fastapi import FastAPI, HTTPException

from tuberank.api.schemas import CategoryOut, GenerateRequest
from tuberank.categories import DEFAULT_CATEGORY, VideoCategory
from tuberank.errors import ValidationError
from tuberank.schemas import GenerationResult
from tuberank.service.controller import Phase
from tuberank.service.generator import GenerateService

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

app = FastAPI(title="tuberank", version="0.1.0")
service = GenerateService()


@app.get("/healthz")
async def healthz() -> dict:
    return {"status": "ok"}


@app.get("/categories", response_model=list[CategoryOut])
async def categories() -> list[CategoryOut]:
    return [CategoryOut(name=item.name, label=item.label) for item in VideoCategory]


@app.post("/generate", response_model=GenerationResult, response_model_by_alias=True)
async def generate(req: GenerateRequest) -> GenerationResult:
    try:
        category = VideoCategory.from_value(req.category) if req.category else DEFAULT_CATEGORY
    except ValueError as exc:
        raise HTTPException(status_code=422, detail={"type": "ValidationError", "message": str(exc)}) from exc

    controller = await service.generate(req.topic, audience=req.audience, category=category)
    if controller.phase is Phase.SUCCESS and controller.result is not None:
        return controller.result

    failure = controller.failure
    status_code = 422 if isinstance(failure, ValidationError) else 502
    raise HTTPException(
        status_code=status_code,
        detail={
            "type": failure.__class__.__name__ if failure is not None else "GenerationError",
            "message": controller.error or "",
        },
    )


def run() -> None:
    import uvicorn

    uvicorn.run("tuberank.api.app:app", host="0.0.0.0", port=8000)
