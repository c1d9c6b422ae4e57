# app/crud/crud_text.py
from app.crud.base import CRUDBase
from app.models.text import Text
from app.schemas.text import TextCreate, TextUpdate


class CRUDText(CRUDBase[Text, TextCreate, TextUpdate]):
    tracks_updates = True

    def order_by(self) -> list:
        return [Text.updated_at.desc()]


text = CRUDText(Text)
