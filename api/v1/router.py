# api/v1/router.py
from fastapi import APIRouter

from . import deliveries, menus, recs

api_router = APIRouter()

api_router.include_router(menus.router, prefix="/menus", tags=["Menus"])
api_router.include_router(recs.router,  prefix="/recommendations", tags=["Recommendations"])
api_router.include_router(deliveries.router, prefix="/deliveries", tags=["Deliveries"])
