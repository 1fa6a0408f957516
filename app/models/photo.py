from app.models.base import CamelModel


class Photo(CamelModel):
    id: str
    filename: str
    original_name: str
    path: str
    size: int
