from enum import Enum


class BudgetStatus(str, Enum):
    RASCUNHO = "rascunho"
    ENVIADO = "enviado"
    APROVADO = "aprovado"
    REJEITADO = "rejeitado"
    VENCIDO = "vencido"


# Status finais: a data de validade não altera mais o status exibido
TERMINAL_BUDGET_STATUSES = (BudgetStatus.APROVADO, BudgetStatus.REJEITADO)
PENDING_BUDGET_STATUSES = (BudgetStatus.RASCUNHO, BudgetStatus.ENVIADO)


class FinanceType(str, Enum):
    RECEITA = "receita"
    DESPESA = "despesa"


class MeetingStatus(str, Enum):
    AGENDADA = "agendada"
    CONCLUIDA = "concluida"
    CANCELADA = "cancelada"


class MarketingType(str, Enum):
    EMAIL = "email"
    SOCIAL = "social"
    ADS = "ads"
    EVENTO = "evento"
    CONTEUDO = "conteudo"


class MarketingStatus(str, Enum):
    PLANEJADA = "planejada"
    ATIVA = "ativa"
    PAUSADA = "pausada"
    CONCLUIDA = "concluida"


class NoteColor(str, Enum):
    DEFAULT = "default"
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    PURPLE = "purple"
