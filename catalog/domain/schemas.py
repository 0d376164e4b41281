# catalog/domain/schemas.py
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class Role(str, Enum):
    ADMIN = "Administrador"
    SELLER = "Vendedor"
    CUSTOMER = "Cliente"


class ProductOut(BaseModel):
    """Product (response), camelCase keys as the shop front-end expects."""

    id: str
    title: str
    description: str = ""
    details: str = ""
    image: str = ""
    badge: str = ""
    price: float
    original_price: float = Field(..., alias="originalPrice")
    category: str
    sizes: List[Any] = Field(default_factory=list)
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class ProductCreated(BaseModel):
    mensaje: str
    id: str
    data: ProductOut


class ProductUpdated(BaseModel):
    mensaje: str
    id: str
    data: Dict[str, Any]


class OrderOut(BaseModel):
    """Order (response)."""

    id: str
    user: Any
    items: List[Any]
    total: float
    date: datetime
    status: str
    created_at: datetime = Field(..., alias="createdAt")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class UserCreate(BaseModel):
    """Schema for creating an account; the password only goes to the identity provider."""

    nombre: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=6, description="Minimo 6 caracteres")
    telefono: Optional[str] = None
    region: str = Field(..., min_length=1)
    comuna: str = Field(..., min_length=1)
    role: Role = Role.CUSTOMER


class UserCreated(BaseModel):
    mensaje: str
    uid: str


class UserRead(BaseModel):
    """Account (response)."""

    id: str
    nombre: str
    email: str
    telefono: Optional[str] = None
    region: str
    comuna: str
    role: Optional[str] = None
    created_at: Optional[datetime] = Field(None, alias="createdAt")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class LoginIn(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class TokenOut(BaseModel):
    token: str
    uid: str
