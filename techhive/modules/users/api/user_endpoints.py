"""
User Management API Endpoints

REST API endpoints for user CRUD operations. Validation and not-found
outcomes are answered here; anything unexpected propagates to the
error-containment stage of the pipeline.
"""
import logging
from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse
from techhive.modules.users.domain.requests import CreateUserRequest, UpdateUserRequest
from techhive.modules.users.exceptions import UserNotFoundError, UserValidationError
from techhive.modules.users.services.user_service import UserService

logger = logging.getLogger("techhive.users.api")

router = APIRouter(prefix="/api/users", tags=["users"])


def get_user_service(request: Request) -> UserService:
    return request.app.state.user_service


def not_found(error: UserNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": str(error)})


def validation_failed(error: UserValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"error": "Validation failed.", "errors": error.errors},
    )


@router.get("")
def list_users(service: UserService = Depends(get_user_service)):
    """Retrieve all users, sorted by ID."""
    return [user.to_dict() for user in service.list_users()]


@router.get("/{user_id}")
def get_user(user_id: int, service: UserService = Depends(get_user_service)):
    """Retrieve a user by ID."""
    logger.debug(f"[user_endpoints.get_user] user_id={user_id}")

    try:
        return service.get_user(user_id).to_dict()
    except UserNotFoundError as e:
        return not_found(e)


@router.post("", status_code=201)
def create_user(
    request: CreateUserRequest,
    response: Response,
    service: UserService = Depends(get_user_service),
):
    """Create a new user."""
    logger.debug(f"[user_endpoints.create_user] email={request.email}")

    try:
        user = service.create_user(request)
    except UserValidationError as e:
        return validation_failed(e)

    response.headers["Location"] = f"/api/users/{user.id}"
    return user.to_dict()


@router.put("/{user_id}")
def update_user(
    user_id: int,
    request: UpdateUserRequest,
    service: UserService = Depends(get_user_service),
):
    """Update an existing user; only supplied fields change."""
    logger.debug(f"[user_endpoints.update_user] user_id={user_id}")

    try:
        return service.update_user(user_id, request).to_dict()
    except UserNotFoundError as e:
        return not_found(e)
    except UserValidationError as e:
        return validation_failed(e)


@router.delete("/{user_id}", status_code=204)
def delete_user(user_id: int, service: UserService = Depends(get_user_service)):
    """Delete a user."""
    logger.debug(f"[user_endpoints.delete_user] user_id={user_id}")

    try:
        service.delete_user(user_id)
    except UserNotFoundError as e:
        return not_found(e)
    return Response(status_code=204)
