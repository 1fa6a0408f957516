from app.models.photo import Photo


class PhotoResult(Photo):
    upvotes: int
    downvotes: int
    score: int
