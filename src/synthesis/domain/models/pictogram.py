"""Static pictogram catalog shown on the library screen."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Pictogram:
    """A communication card."""

    id: int
    title: str
    icon: str

    def to_dict(self) -> dict:
        return {"id": self.id, "title": self.title, "icon": self.icon}


PICTOGRAM_CATALOG: tuple[Pictogram, ...] = (
    Pictogram(id=1, title="Food", icon="🍎"),
    Pictogram(id=2, title="Drink", icon="💧"),
    Pictogram(id=3, title="Toilet", icon="🚽"),
    Pictogram(id=4, title="Sleep", icon="😴"),
    Pictogram(id=5, title="Outside", icon="🌳"),
    Pictogram(id=6, title="Play", icon="🧸"),
)
