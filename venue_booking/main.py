import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from venue_booking.api.pages import router as pages_router
from venue_booking.api.payment import router as payment_router
from venue_booking.core.config import settings

class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("session_id", "venue_id", "step", "slot_id", "payment_id", "reason"):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)

app = FastAPI(title=settings.BUSINESS_NAME, version="1.0.0")

app.include_router(pages_router, tags=["pages"])
app.include_router(payment_router, tags=["booking"])


@app.exception_handler(StarletteHTTPException)
async def http_error_page(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    content: dict = {"detail": exc.detail}
    if exc.status_code == 404:
        content["page"] = "not-found"
    return JSONResponse(status_code=exc.status_code, content=content, headers=getattr(exc, "headers", None))


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
