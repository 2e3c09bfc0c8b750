from dataclasses import dataclass
from typing import Optional


@dataclass
class Transaction:
    id: int
    kind: str               # 'income' | 'expense'
    amount: float           # magnitude; sign follows kind
    category: Optional[str]
    note: Optional[str]
    occurred_at: str        # 'YYYY-MM-DD'
    created_at: str = ""
