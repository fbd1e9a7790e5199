from typing import List, Optional

from fastapi import APIRouter, Query
from pydantic import BaseModel

from fixitbot.core.di.service_locator import ServiceLocator


router = APIRouter(prefix="/api/v1/catalog", tags=["catalog"])


class GuideResponse(BaseModel):
    id: str
    title: str
    difficulty: str
    time: str
    video_url: str
    steps: List[str]
    tags: List[str]


class WorkshopResponse(BaseModel):
    id: str
    name: str
    address: str
    services: List[str]
    phone: Optional[str] = None
    whatsapp: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None
    hours: Optional[str] = None
    maps_url: str


@router.get("/diy", response_model=List[GuideResponse])
def list_guides(q: Optional[str] = Query(None, description="Texto a buscar en título, etiquetas o pasos")):
    guides = ServiceLocator.catalog_usecase().guides(q)
    return [
        GuideResponse(
            id=g.id,
            title=g.title,
            difficulty=g.difficulty,
            time=g.time,
            video_url=g.video_url,
            steps=list(g.steps),
            tags=list(g.tags),
        )
        for g in guides
    ]


@router.get("/workshops", response_model=List[WorkshopResponse])
def list_workshops(q: Optional[str] = Query(None, description="Nombre, servicio o zona")):
    workshops = ServiceLocator.catalog_usecase().workshops(q)
    return [
        WorkshopResponse(
            id=w.id,
            name=w.name,
            address=w.address,
            services=list(w.services),
            phone=w.phone,
            whatsapp=w.whatsapp,
            lat=w.lat,
            lng=w.lng,
            hours=w.hours,
            maps_url=w.maps_url,
        )
        for w in workshops
    ]
