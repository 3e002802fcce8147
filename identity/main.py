from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from identity import __version__
from identity.api.v1 import api_router
from identity.core.config import get_settings
from identity.core.exceptions import APIException
from identity.core.logging import app_logger

settings = get_settings()

app = FastAPI(
    title="Identity Manager API",
    version=__version__,
    description="Users, groups and group membership",
    docs_url="/docs",
    openapi_url="/openapi.json",
)


@app.exception_handler(APIException)
async def api_exception_handler(request: Request, exc: APIException) -> JSONResponse:
    """Render APIException as ``{"error": {...}, "data": null}``."""
    response_content = exc.detail.copy()
    response_content["data"] = None
    return JSONResponse(
        status_code=exc.status_code,
        content=response_content,
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Convert Pydantic validation errors to the standard error format."""
    details: dict[str, list[str]] = {}
    for error in exc.errors():
        # Ignore "body", "query", "path" and keep the actual field name
        field_path = error["loc"]
        field_name = str(field_path[-1] if len(field_path) > 1 else field_path[0])
        details.setdefault(field_name, []).append(error["msg"])

    response_content = {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Validation failed",
            "details": details,
        },
        "data": None,
    }
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=response_content,
    )


@app.get("/healthz", tags=["system"])
def healthz():
    """Health check endpoint."""
    return {
        "status": "ok",
        "env": settings.ENV,
        "version": __version__,
    }


app.include_router(api_router, prefix="/api/v1")
app_logger.info(f"Identity Manager API {__version__} ready (env={settings.ENV})")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "identity.main:app",
        host="0.0.0.0",
        port=9115,
    )
