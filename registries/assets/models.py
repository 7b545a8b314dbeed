# registries/assets/models.py
"""
Pydantic models for equipment assets.
"""
from pydantic import BaseModel


class AssetCreate(BaseModel):
    name: str
    model: str
    manufacturer: str
    year: int
    serial_number: str


class Asset(BaseModel):
    """A registered piece of equipment."""
    id: int
    name: str
    model: str
    manufacturer: str
    year: int
    serial_number: str
    owner: str
    available: bool = True
