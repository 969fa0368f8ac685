from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["Health"])


@router.get("/", response_class=PlainTextResponse)
async def read_root():
    """Liveness check."""
    return "Backend running 👍"
