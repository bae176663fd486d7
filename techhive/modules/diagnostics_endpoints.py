"""
Diagnostics Endpoints

Routes that exist only to exercise the request pipeline.
"""
from fastapi import APIRouter

router = APIRouter(prefix="/api/test", tags=["Diagnostics"])


class DiagnosticFault(RuntimeError):
    """Raised on purpose by /api/test/throw"""
    pass


@router.get("/throw")
def throw():
    """
    Always fails. The error-containment stage must turn this into a generic
    500 without exposing the message below.
    """
    raise DiagnosticFault("This is a test exception.")
