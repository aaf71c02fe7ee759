# hacklog/core/json.py
from typing import Any
import json
from fastapi.encoders import jsonable_encoder
from starlette.responses import JSONResponse


class UTF8JSONResponse(JSONResponse):
    """
    JSON en UTF-8 sin escapes ASCII. Pasa antes por jsonable_encoder
    para fechas (date/datetime) y modelos pydantic.
    """
    media_type = "application/json; charset=utf-8"

    def render(self, content: Any) -> bytes:
        payload = jsonable_encoder(content, exclude_none=False)
        return json.dumps(
            payload,
            ensure_ascii=False,
            allow_nan=False,
            separators=(",", ":"),
        ).encode("utf-8")


def error_response(status_code: int, message: str) -> UTF8JSONResponse:
    # mismo formato que HTTPException de FastAPI: {"detail": "..."}
    return UTF8JSONResponse(status_code=status_code, content={"detail": message})
