# inquiry_api/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from inquiry_api import __version__
from inquiry_api.config import Settings, get_settings
from inquiry_api.logging_config import setup_logging
from inquiry_api.services.email import MailTransport, build_transport
from inquiry_api.services.inquiry import InquiryHandler

# Routers
from inquiry_api.routers.health import router as health_router
from inquiry_api.routers.inquiries import router as inquiries_router
from inquiry_api.routers.spa import router as spa_router

log = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, transport: MailTransport | None = None) -> FastAPI:
    settings = settings or get_settings()
    # one transport per process, shared read-only by every request
    transport = transport or build_transport(settings)

    app = FastAPI(title=f"{settings.BRAND_NAME} Inquiry Server", version=__version__)
    app.state.settings = settings
    app.state.transport = transport
    app.state.inquiry_handler = InquiryHandler(transport, settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ---------- Unhandled errors ----------
    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        log.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse({"success": False, "message": "Internal server error"}, status_code=500)

    # ---------- Routers ----------
    app.include_router(health_router)
    app.include_router(inquiries_router)
    # SPA fallback must stay last
    app.include_router(spa_router)

    # ---------- Startup ----------
    @app.on_event("startup")
    def on_startup():
        log.info("%s Inquiry Server starting (env=%s)", settings.BRAND_NAME, settings.ENV)
        missing = settings.missing_mail_settings()
        if missing:
            log.warning("Warning: email credentials or target email not configured properly (missing: %s)",
                        ", ".join(missing))
        if settings.VERIFY_TRANSPORT_ON_STARTUP and not transport.verify():
            log.warning("Mail transport failed verification; inquiries will fail until it is reachable")

    return app


app = create_app()


def run() -> None:
    import uvicorn

    settings = get_settings()
    # handlers first, so transport selection and startup checks reach app.log
    cfg = setup_logging(settings.LOG_DIR, settings.LOG_LEVEL)
    served = create_app(settings)
    uvicorn.run(served, host="0.0.0.0", port=settings.PORT, log_config=cfg)


if __name__ == "__main__":
    run()
