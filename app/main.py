import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.config import settings
from app.api.routers.licence_plate import router as licence_plate_router
from app.application.dtos.responses.general_response import GeneralResponse
from app.domain.errors import ValidationErrorKind
from app.infrastructure.db import SessionLocal
from app.infrastructure.distinguisher_csv_loader import seed_distinguishers
from app.infrastructure.distinguisher_repository import DistinguisherRepository


def _configure_logging() -> None:
    level = getattr(logging, settings.log_level, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


_configure_logging()
logger = logging.getLogger("app.http")


def _seed_reference_data() -> None:
    db = SessionLocal()
    try:
        repo = DistinguisherRepository(db)
        if settings.seed_distinguishers:
            seed_distinguishers(repo, settings.distinguisher_csv_path)
        else:
            repo.create_schema()
            db.commit()
            logger.info("distinguisher_seeding_skipped count=%s", repo.count())
    finally:
        db.close()


@asynccontextmanager
async def lifespan(_: FastAPI):
    _seed_reference_data()
    yield


app = FastAPI(lifespan=lifespan)


@app.middleware("http")
async def log_http_requests(request: Request, call_next):
    start = time.perf_counter()
    client = request.client.host if request.client else "-"
    logger.info(
        "request_started method=%s path=%s client=%s",
        request.method,
        request.url.path,
        client,
    )

    try:
        response = await call_next(request)
    except Exception:
        duration_ms = (time.perf_counter() - start) * 1000
        logger.exception(
            "request_failed method=%s path=%s duration_ms=%.2f",
            request.method,
            request.url.path,
            duration_ms,
        )
        raise

    duration_ms = (time.perf_counter() - start) * 1000
    logger.info(
        "request_finished method=%s path=%s status=%s duration_ms=%.2f",
        request.method,
        request.url.path,
        response.status_code,
        duration_ms,
    )
    return response


@app.exception_handler(RequestValidationError)
async def handle_invalid_request(request: Request, exc: RequestValidationError):
    errors = [
        {"loc": [str(part) for part in error["loc"]], "msg": error["msg"], "type": error["type"]}
        for error in exc.errors()
    ]
    response = GeneralResponse.failure(
        code=ValidationErrorKind.INVALID_FORMAT.value,
        message="Ungueltige Anfrage",
        details={"errors": errors},
    )
    logger.warning(
        "request_invalid method=%s path=%s errors=%s",
        request.method,
        request.url.path,
        errors,
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=response.model_dump())


app.include_router(licence_plate_router)
