# app/api/endpoints/marketing.py
import logging
from typing import Any, List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app import crud, schemas
from app.api import deps
from app.api.errors import backend_message

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[schemas.MarketingCampaign])
def read_campaigns(db: Session = Depends(deps.get_db)) -> Any:
    return crud.marketing.get_multi(db)


@router.get("/{campaign_id}", response_model=schemas.MarketingCampaign)
def read_campaign_by_id(campaign_id: str, db: Session = Depends(deps.get_db)) -> Any:
    db_campaign = crud.marketing.get(db=db, id=campaign_id)
    if not db_campaign:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Campanha não encontrada")
    return db_campaign


@router.post("", response_model=schemas.MarketingCampaign, status_code=status.HTTP_201_CREATED)
def create_campaign(
    *, db: Session = Depends(deps.get_db), campaign_in: schemas.MarketingCampaignCreate
) -> Any:
    """
    Cria uma campanha de marketing. Verba e gasto em centavos.
    """
    try:
        db_campaign = crud.marketing.create(db=db, obj_in=campaign_in)
    except SQLAlchemyError as e:
        logger.error(f"Erro ao criar campanha: {backend_message(e)}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=backend_message(e))
    logger.info(f"Campanha '{db_campaign.name}' criada ({db_campaign.type})")
    return db_campaign


@router.put("/{campaign_id}", response_model=schemas.MarketingCampaign)
def update_campaign(
    *,
    db: Session = Depends(deps.get_db),
    campaign_id: str,
    campaign_in: schemas.MarketingCampaignUpdate,
) -> Any:
    db_campaign = crud.marketing.get(db=db, id=campaign_id)
    if not db_campaign:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Campanha não encontrada")
    return crud.marketing.update(db=db, db_obj=db_campaign, obj_in=campaign_in)


@router.delete("/{campaign_id}", response_model=schemas.DeleteResponse)
def delete_campaign(*, db: Session = Depends(deps.get_db), campaign_id: str) -> Any:
    if not crud.marketing.remove(db=db, id=campaign_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Campanha não encontrada")
    logger.info(f"Campanha {campaign_id} removida")
    return {"success": True}
