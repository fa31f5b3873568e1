"""Student API Routes - Route registration only."""

from fastapi import APIRouter

from campus.api.v1 import STUDENTS_PREFIX
from campus.api.v1.students import api

router = APIRouter()
router.include_router(api.router, prefix=STUDENTS_PREFIX, tags=["Students"])
