from typing import List

from fastapi import APIRouter, HTTPException

from app.models.schemas import Matter
from app.services.matters import get_matter, list_matters

router = APIRouter()


@router.get("", response_model=List[Matter])
def get_matters():
    """List matters on the dashboard"""
    return list_matters()


@router.get("/{matter_id}", response_model=Matter)
def get_matter_detail(matter_id: str):
    matter = get_matter(matter_id)
    if not matter:
        raise HTTPException(status_code=404, detail="Matter not found")
    return matter
