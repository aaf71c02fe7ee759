# hacklog/main.py
import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from hacklog.core.json import UTF8JSONResponse, error_response
from hacklog.core.config import settings
from hacklog.core.errors import AppError, InternalError, format_validation_errors
from hacklog.db.init_db import init_models

# routers
from hacklog.users.router import router as auth_router
from hacklog.profile.router import router as profile_router
from hacklog.projects.router import router as projects_router, search_router

log = logging.getLogger("uvicorn")

app = FastAPI(
    title="HackLog API",
    default_response_class=UTF8JSONResponse,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allow_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------- errores → JSON {"detail": ...} ----------
@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return error_response(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    # 400 (no 422) con un mensaje que el front muestra tal cual
    return error_response(400, format_validation_errors(exc.errors()))


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    log.error(f"❌ error no controlado en {request.method} {request.url.path}", exc_info=exc)
    err = InternalError()
    return error_response(err.status_code, err.message)


@app.on_event("startup")
async def on_startup():
    log.info("🚀 Iniciando servicio…")
    if settings.AUTO_CREATE_TABLES:
        await init_models()
    log.info("✅ Startup listo.")


@app.get("/api/health")
async def health():
    return {"ok": True, "service": "hacklog"}


# routers
app.include_router(auth_router)      # /api/auth/...
app.include_router(profile_router)   # /api/profile/...
app.include_router(projects_router)  # /api/projects/...
app.include_router(search_router)    # /api/search
