# hospital_forms/api/intake.py
import json
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from starlette.concurrency import run_in_threadpool

from hospital_forms.core.deps import intake_handler
from hospital_forms.core.errors import RequestError
from hospital_forms.schemas.submissions import ErrorOut
from hospital_forms.services.intake import IntakeHandler, IntakeSchema


async def read_json_body(request: Request):
    body = await request.body()
    # ValueError couvre JSONDecodeError, UnicodeDecodeError et les entiers
    # de plus de 4300 chiffres ; RecursionError les imbrications trop profondes
    try:
        return json.loads(body)
    except (ValueError, RecursionError) as exc:
        raise RequestError("Invalid request body. Expected a JSON object.") from exc


def build_intake_router(schema: IntakeSchema) -> APIRouter:
    router = APIRouter()
    get_handler = intake_handler(schema.kind)

    @router.post(
        "",
        responses={400: {"model": ErrorOut}, 500: {"model": ErrorOut}},
        name=f"submit_{schema.kind}",
    )
    async def submit(request: Request, handler: IntakeHandler = Depends(get_handler)):
        payload = await read_json_body(request)
        # SMTP est bloquant : on sort de la boucle d'événements
        result = await run_in_threadpool(handler.submit, payload)
        return result.to_response()

    @router.get("", name=f"status_{schema.kind}")
    def status(
        action: Optional[str] = Query(default=None),
        handler: IntakeHandler = Depends(get_handler),
    ):
        if action == "test":
            return handler.diagnostics().model_dump(mode="json", by_alias=True)
        return handler.status().model_dump(mode="json", by_alias=True)

    return router
