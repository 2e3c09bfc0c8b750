from dataclasses import dataclass


@dataclass
class MonthlySummary:
    total_income: float = 0.0
    total_expense: float = 0.0
    net_balance: float = 0.0
    transaction_count: int = 0


@dataclass
class CategorySlice:
    name: str
    value: float
    color: str
    percentage: float = 0.0     # 0-100
