import os
import random
import time

PUBLIC_PREFIX = "/uploads"


class PhotoStorage:
    """Writes uploaded image bytes to the directory served under /uploads."""

    def __init__(self, directory: str):
        self.directory = directory

    def generate_filename(self, original_name: str) -> str:
        _, ext = os.path.splitext(original_name)
        return f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}{ext}"

    def public_path(self, filename: str) -> str:
        return f"{PUBLIC_PREFIX}/{filename}"

    def write(self, filename: str, data: bytes) -> None:
        os.makedirs(self.directory, exist_ok=True)
        with open(os.path.join(self.directory, filename), "wb") as f:
            f.write(data)
