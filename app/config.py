from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    sessions_dir: str = "./sessions"
    uploads_dir: str = "./uploads"
    public_dir: str = "./public"
    max_photo_size_bytes: int = 10 * 1024 * 1024  # 10MB
    max_photos_per_upload: int = 100
    # votes on photo ids the session does not contain still get a tally
    allow_votes_on_unknown_photos: bool = True
    atomic_session_writes: bool = False
    owner_cookie_name: str = "userId"
    owner_cookie_max_age: int = 365 * 24 * 60 * 60  # 1 year
    cors_origins: list[str] = ["http://localhost:3001"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
