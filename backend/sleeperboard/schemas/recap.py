from typing import Optional
from pydantic import BaseModel


class RecapRequest(BaseModel):
    style: Optional[str] = None  # free-text tone tag
    force: bool = False


class RecapResponse(BaseModel):
    recap: Optional[str] = None
    style: Optional[str] = None
