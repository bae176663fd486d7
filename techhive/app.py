from contextlib import asynccontextmanager
from typing import Any, Dict, Optional, Sequence
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from techhive.config import Settings, load_settings
from techhive.modules.diagnostics_endpoints import router as diagnostics_router
from techhive.modules.pipeline import error_containment, install_pipeline, request_logging
from techhive.modules.users.api import user_router
from techhive.modules.users.auth import token_authentication
from techhive.modules.users.repositories import UserRepository
from techhive.modules.users.services import UserProvisioningService, UserService

# Outermost first. Error containment sees faults from every later stage;
# authentication gates the handler and the success log line.
PIPELINE = (error_containment, token_authentication, request_logging)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    UserProvisioningService(app.state.user_repository).seed_users()
    yield


def _field_name(loc: Sequence[Any]) -> str:
    parts = [str(p) for p in loc if p not in ("body", "path", "query", "header")]
    name = parts[-1] if parts else str(loc[0])
    return "".join(part[:1].upper() + part[1:] for part in name.split("_"))


async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors: Dict[str, list] = {}
    for error in exc.errors():
        errors.setdefault(_field_name(error["loc"]), []).append(error["msg"])
    return JSONResponse(status_code=400, content={"error": "Validation failed.", "errors": errors})


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[UserRepository] = None,
) -> FastAPI:
    settings = settings or load_settings()
    repository = repository or UserRepository()

    app = FastAPI(
        title="UserManagementAPI",
        version="v1",
        lifespan=lifespan,
        docs_url="/swagger",
        openapi_url="/swagger/v1/swagger.json",
        redoc_url=None,
    )
    app.state.settings = settings
    app.state.user_repository = repository
    app.state.user_service = UserService(repository)

    app.add_exception_handler(RequestValidationError, request_validation_handler)
    install_pipeline(app, PIPELINE)

    # Include Surface Routers
    app.include_router(user_router)
    app.include_router(diagnostics_router)

    return app


app = create_app()
