from dataclasses import dataclass
from typing import Optional, Tuple
from urllib.parse import quote


@dataclass(frozen=True)
class GuideCard:
    """A DIY repair guide shown in the public guide catalog."""
    id: str
    title: str
    difficulty: str
    time: str
    video_id: str
    steps: Tuple[str, ...]
    tags: Tuple[str, ...]

    @property
    def video_url(self) -> str:
        return f"https://www.youtube.com/watch?v={self.video_id}"

    def search_text(self) -> str:
        return " ".join([self.title, self.difficulty, self.time, *self.tags, *self.steps]).lower()


@dataclass(frozen=True)
class Workshop:
    """A nearby body shop listed in the workshop directory."""
    id: str
    name: str
    address: str
    services: Tuple[str, ...]
    phone: Optional[str] = None
    whatsapp: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None
    hours: Optional[str] = None

    @property
    def maps_url(self) -> str:
        if self.lat and self.lng:
            return f"https://www.google.com/maps/search/{quote(self.name)}/@{self.lat},{self.lng},16z"
        return f"https://www.google.com/maps/search/{quote(self.name + ' ' + self.address)}"

    def search_text(self) -> str:
        return " ".join([self.name, self.address, self.hours or "", *self.services]).lower()
