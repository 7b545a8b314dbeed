# registries/lessees/models.py
from pydantic import BaseModel


class CompanyCreate(BaseModel):
    name: str
    address: str
    license_number: str


class Company(BaseModel):
    id: int
    name: str
    address: str
    license_number: str
    verified: bool = False
    admin: str


class Verifier(BaseModel):
    """An identity the contract owner has authorised to verify companies."""
    principal: str
    active: bool = True
