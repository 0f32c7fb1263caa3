from fastapi import APIRouter

from marketplace.core.utils import utc_now_iso

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    return {"status": "OK", "timestamp": utc_now_iso()}
