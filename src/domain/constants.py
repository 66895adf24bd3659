"""Domain constants for household finance analytics."""

from decimal import Decimal

OWNERS = ("partner1", "partner2", "joint")
HOLDERS = ("partner1", "partner2")
FILTER_ALL = "all"

TRANSACTION_TYPES = ("income", "expense")
BILL_STATUSES = ("pending", "paid")
INVOICE_STATUSES = ("pending", "paid")
PURCHASE_STATUSES = ("active", "completed")
DUE_DATE_TYPES = ("bill", "installment", "income")

INVESTMENT_TYPES = (
    "Ações",
    "Títulos",
    "Fundo Mútuo",
    "ETF",
    "Imóvel",
    "Criptomoeda",
    "Renda Fixa",
    "Poupança",
    "CDB",
    "Outro",
)

TRANSACTION_CATEGORIES = {
    "income": (
        "Salário",
        "Auxílio",
        "VR",
        "Vale-Refeição",
        "Freelancer",
        "Retorno de Investimento",
        "Outra Renda",
    ),
    "expense": (
        "Supermercado",
        "Transporte",
        "Utilidades",
        "Entretenimento",
        "Refeições",
        "Saúde",
        "Compras",
        "Assinaturas",
        "Seguros",
        "Educação",
        "Aluguel",
        "Outras Despesas",
    ),
}

# Income category that absorbs enabled recurring incomes in reports.
RECURRING_INCOME_CATEGORY = "Salário"

# CDB pays 120% of a 13% yearly reference rate.
CDB_REFERENCE_RATE = Decimal("0.13")
CDB_RATE_MULTIPLIER = Decimal("1.2")
RENDA_FIXA_MONTHLY_RATE = Decimal("0.008")
POUPANCA_MONTHLY_RATE = Decimal("0.005")

HIGH_UTILIZATION_THRESHOLD = Decimal("0.8")

TREND_MONTHS = 12
TREND_WEEKS = 4
UPCOMING_BILLS_DAYS = 30

MONTH_ABBREVIATIONS = (
    "jan",
    "fev",
    "mar",
    "abr",
    "mai",
    "jun",
    "jul",
    "ago",
    "set",
    "out",
    "nov",
    "dez",
)

PARTNER_LABELS = {
    "partner1": "Parceiro 1",
    "partner2": "Parceiro 2",
    "joint": "Conjunta",
}


__all__ = [
    "OWNERS",
    "HOLDERS",
    "FILTER_ALL",
    "TRANSACTION_TYPES",
    "BILL_STATUSES",
    "INVOICE_STATUSES",
    "PURCHASE_STATUSES",
    "DUE_DATE_TYPES",
    "INVESTMENT_TYPES",
    "TRANSACTION_CATEGORIES",
    "RECURRING_INCOME_CATEGORY",
    "CDB_REFERENCE_RATE",
    "CDB_RATE_MULTIPLIER",
    "RENDA_FIXA_MONTHLY_RATE",
    "POUPANCA_MONTHLY_RATE",
    "HIGH_UTILIZATION_THRESHOLD",
    "TREND_MONTHS",
    "TREND_WEEKS",
    "UPCOMING_BILLS_DAYS",
    "MONTH_ABBREVIATIONS",
    "PARTNER_LABELS",
]
