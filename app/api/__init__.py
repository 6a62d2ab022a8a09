from fastapi import APIRouter

from .routes import (
    admin,
    auth,
    customers,
    galleries,
    health,
    users,
)

api_router = APIRouter()

# Health check
api_router.include_router(health.router, tags=["health"])

# Authentication (admin and customer logins)
api_router.include_router(auth.router, prefix="/api", tags=["auth"])

# Admin: customer account management
api_router.include_router(admin.router, prefix="/api/admin", tags=["admin"])

# Customer-scoped resources: settings, stats, profile
api_router.include_router(customers.router, prefix="/api/customer", tags=["customers"])

# Wedding galleries (owner and public endpoints)
api_router.include_router(galleries.router, prefix="/api", tags=["galleries"])

# Legacy standalone users
api_router.include_router(users.router, prefix="/api/users", tags=["users"])
