from __future__ import annotations

from pydantic import BaseModel


class ApiMessage(BaseModel):
    message: str = "Hello from API!"
    timestamp: str
    status: str = "success"
