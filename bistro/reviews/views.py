from fastapi import APIRouter

from bistro.config import API_PREFIX
from . import repository as reviews_repository

router = APIRouter(prefix=API_PREFIX, tags=["Reviews API"])

@router.get("/reviews")
def list_reviews():
    return reviews_repository.list_reviews()
