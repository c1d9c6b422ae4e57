# app/schemas/client.py
from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field
from typing_extensions import Annotated

from app.schemas.base import BlankAsNone, CamelModel, PartialText, RequiredText

OptionalEmail = Annotated[Optional[EmailStr], BlankAsNone]


class ClientBase(CamelModel):
    name: RequiredText = Field(..., examples=["Acme Ltda"])
    email: OptionalEmail = Field(None, examples=["contato@acme.com.br"])
    phone: Optional[str] = Field(None, examples=["(11) 99999-8888"])
    company: Optional[str] = None
    notes: Optional[str] = None


class ClientCreate(ClientBase):
    pass


class ClientUpdate(CamelModel):
    name: PartialText = None
    email: OptionalEmail = None
    phone: Optional[str] = None
    company: Optional[str] = None
    notes: Optional[str] = None


class Client(ClientBase):
    id: str
    created_at: datetime
