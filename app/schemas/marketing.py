# app/schemas/marketing.py
import datetime as dt
from typing import Optional

from pydantic import Field
from typing_extensions import Annotated

from app.enums import MarketingStatus, MarketingType
from app.schemas.base import BlankAsNone, CamelModel, NotNull, PartialText, RequiredText

OptionalDate = Annotated[Optional[dt.date], BlankAsNone]


class MarketingCampaignBase(CamelModel):
    name: RequiredText = Field(..., examples=["Black Friday 2026"])
    type: MarketingType = MarketingType.EMAIL
    status: MarketingStatus = MarketingStatus.PLANEJADA
    budget: int = Field(0, ge=0, description="Verba em centavos")
    spent: int = Field(0, ge=0, description="Gasto em centavos")
    start_date: OptionalDate = None
    end_date: OptionalDate = None
    description: Optional[str] = None
    notes: Optional[str] = None


class MarketingCampaignCreate(MarketingCampaignBase):
    pass


class MarketingCampaignUpdate(CamelModel):
    name: PartialText = None
    type: Annotated[Optional[MarketingType], NotNull] = None
    status: Annotated[Optional[MarketingStatus], NotNull] = None
    budget: Annotated[Optional[int], NotNull] = Field(None, ge=0)
    spent: Annotated[Optional[int], NotNull] = Field(None, ge=0)
    start_date: OptionalDate = None
    end_date: OptionalDate = None
    description: Optional[str] = None
    notes: Optional[str] = None


class MarketingCampaign(MarketingCampaignBase):
    id: str
    created_at: dt.datetime
