from fastapi import APIRouter
from packages.pagerduty import pagerduty_router


# Main v1 router (includes all endpoints)
router = APIRouter()
router.include_router(pagerduty_router)
