# app/crud/crud_marketing.py
from app.crud.base import CRUDBase
from app.models.marketing import MarketingCampaign
from app.schemas.marketing import MarketingCampaignCreate, MarketingCampaignUpdate


class CRUDMarketingCampaign(CRUDBase[MarketingCampaign, MarketingCampaignCreate, MarketingCampaignUpdate]):
    pass


marketing = CRUDMarketingCampaign(MarketingCampaign)
