from typing import Any


def success_response(data: Any = None, message: str | None = None) -> dict:
    return {"status": "success", "data": data, "message": message}


def error_response(message: str, details: str | None = None, field: str | None = None) -> dict:
    body: dict = {"error": message}
    if details is not None:
        body["details"] = details
    if field is not None:
        body["field"] = field
    return body
