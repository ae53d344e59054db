"""Router do Inter — agrega os endpoints de token e cobrança."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.inter.charges import router as charges_router
from api.routes.inter.oauth import router as oauth_router

router = APIRouter()

router.include_router(oauth_router)
router.include_router(charges_router)
