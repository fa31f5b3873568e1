"""Course API Routes - Route registration only."""

from fastapi import APIRouter

from campus.api.v1 import COURSES_PREFIX
from campus.api.v1.courses import api

router = APIRouter()
router.include_router(api.router, prefix=COURSES_PREFIX, tags=["Courses"])
