# app/schemas/base.py
from typing import Any, Optional

from pydantic import AfterValidator, BaseModel, BeforeValidator
from pydantic.alias_generators import to_camel
from typing_extensions import Annotated


class CamelModel(BaseModel):
    """
    Base dos schemas da API.
    No JSON os campos trafegam em camelCase (clientName, totalValue...),
    internamente e no banco em snake_case. O alias_generator faz a tradução
    nos dois sentidos, então nenhum endpoint mapeia campo a campo.
    """

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
        use_enum_values = True


class DeleteResponse(BaseModel):
    success: bool = True


def not_blank(value: Optional[str]) -> str:
    if value is None or not value.strip():
        raise ValueError("campo obrigatório não pode ser vazio")
    return value


def not_null(value: Any) -> Any:
    if value is None:
        raise ValueError("campo não pode ser nulo")
    return value


def blank_to_none(value: Any) -> Any:
    # Formulários enviam "" para datas e e-mails não preenchidos
    if isinstance(value, str) and not value.strip():
        return None
    return value


# Texto obrigatório na criação
RequiredText = Annotated[str, AfterValidator(not_blank)]
# Mesmo campo em atualizações parciais: pode faltar, mas não vir vazio ou nulo
PartialText = Annotated[Optional[str], AfterValidator(not_blank)]

NotNull = AfterValidator(not_null)
BlankAsNone = BeforeValidator(blank_to_none)
