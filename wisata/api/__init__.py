"""API routes."""

from fastapi import APIRouter

from wisata.api import admin_init, auth, health

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.consumer_router, prefix="/auth/consumer", tags=["consumer-auth"])
router.include_router(auth.admin_router, prefix="/auth/admin", tags=["admin-auth"])
router.include_router(admin_init.router, prefix="/admin/init", tags=["admin-init"])
