import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from marketmind.config import Settings
from marketmind.exceptions import PaymentError
from marketmind.routes import health, payments

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not app.state.settings.credentials_configured:
        logger.warning(
            "CASHFREE_APP_ID or CASHFREE_SECRET_KEY not set in env; "
            "payment creation will fail until they are configured"
        )
    yield


async def payment_error_handler(request: Request, exc: PaymentError):
    content = {"success": False, "error": exc.error}
    if exc.raw is not None:
        content["raw"] = exc.raw
    return JSONResponse(status_code=exc.status_code, content=content)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Rejected request body on {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content={"success": False, "error": "Invalid request body"},
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    app = FastAPI(title="MarketMind Pay", lifespan=lifespan)
    app.state.settings = settings or Settings()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(PaymentError, payment_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(health.router, tags=["Health"])
    app.include_router(payments.router, tags=["Payments"])
    return app


app = create_app()


def run():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(app, host="0.0.0.0", port=app.state.settings.port)
