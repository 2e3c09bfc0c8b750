APP_NAME = "Porket"
APP_WIDTH = 1180
APP_HEIGHT = 780
DB_FILE = "porket.db"
TRANSACTIONS_TABLE = "transactions"
DATE_FORMAT = "%Y-%m-%d"

PAGE_SIZE = 3
PAGE_WINDOW = 5

UNCATEGORIZED = "Uncategorized"
EXPORT_PREFIX = "porket-transactions"

TRANSACTION_KINDS = ["income", "expense"]

KIND_COLORS = {
    "income":  "#22c55e",
    "expense": "#ef4444",
}

KIND_ICONS = {
    "income":  "↗",
    "expense": "↙",
}

# Pie slices cycle through these by position
CHART_COLORS = [
    "#ef4444",  # red
    "#f97316",  # orange
    "#eab308",  # yellow
    "#22c55e",  # green
    "#06b6d4",  # cyan
    "#3b82f6",  # blue
    "#8b5cf6",  # violet
    "#ec4899",  # pink
    "#64748b",  # slate
    "#78716c",  # stone
]

DEFAULT_SETTINGS = [
    ("appearance_mode", "system"),
    ("currency_symbol", "$"),
]
