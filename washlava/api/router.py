from fastapi import APIRouter

from washlava.api import auth, carts, catalog, health, reviews, users

router = APIRouter()
router.include_router(health.router)
router.include_router(auth.router)
router.include_router(users.router)
router.include_router(catalog.router)
router.include_router(carts.router)
router.include_router(reviews.router)
