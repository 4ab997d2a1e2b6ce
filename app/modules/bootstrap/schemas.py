from pydantic import BaseModel
from typing import List


class InitializeResponse(BaseModel):
    success: bool
    message: str
    created: List[str] = []


class InitializationStatusResponse(BaseModel):
    initialized: bool
    message: str
