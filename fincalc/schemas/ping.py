"""Pydantic schema for the health-check endpoint."""

from typing import List

from pydantic import BaseModel


class PingResponse(BaseModel):
    message: str
    version: str
    calculators: List[str]
