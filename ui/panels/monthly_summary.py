import logging
import customtkinter as ctk

from database.query_client import DataServiceError
from models.summary import MonthlySummary
from services.summary_service import SummaryService
from utils.currency import format_currency, format_signed
from utils.date_helpers import friendly_month

logger = logging.getLogger(__name__)


class MonthlySummaryPanel(ctk.CTkFrame):
    def __init__(
        self,
        master,
        summary_service: SummaryService,
        currency_symbol: str = "$",
        **kwargs,
    ):
        super().__init__(master, corner_radius=10, **kwargs)
        self._summary_svc = summary_service
        self._symbol = currency_symbol
        self.summary = MonthlySummary()

        self.grid_columnconfigure((0, 1, 2, 3), weight=1)

        self._title_var = ctk.StringVar()
        ctk.CTkLabel(
            self, textvariable=self._title_var,
            font=ctk.CTkFont(size=16, weight="bold"),
        ).grid(row=0, column=0, columnspan=4, padx=16, pady=(14, 6), sticky="w")

        self._card_frame = ctk.CTkFrame(self, fg_color="transparent")
        self._card_frame.grid(row=1, column=0, columnspan=4, sticky="ew", padx=10, pady=(0, 12))
        self._card_frame.grid_columnconfigure((0, 1, 2, 3), weight=1)

        self._load()

    def refresh(self):
        self._load()

    def _load(self):
        self._title_var.set(f"{friendly_month()} Summary")
        try:
            self.summary = self._summary_svc.get_monthly_summary()
        except DataServiceError:
            logger.exception("Fetching monthly summary failed")
            return

        for w in self._card_frame.winfo_children():
            w.destroy()

        s = self.summary
        net_color = "#3b82f6" if s.net_balance >= 0 else "#f97316"
        cards = [
            ("Income",       format_currency(s.total_income, self._symbol),  "#22c55e"),
            ("Expenses",     format_currency(s.total_expense, self._symbol), "#ef4444"),
            ("Net Balance",  format_signed(s.net_balance, self._symbol),    net_color),
            ("Transactions", str(s.transaction_count),                        "gray50"),
        ]
        for i, (label, text, color) in enumerate(cards):
            self._make_card(i, label, text, color)

    def _make_card(self, col, label, text, color):
        card = ctk.CTkFrame(self._card_frame, fg_color=("gray90", "gray20"), corner_radius=10)
        card.grid(row=0, column=col, padx=6, sticky="ew")
        card.grid_columnconfigure(0, weight=1)
        ctk.CTkLabel(
            card, text=label, font=ctk.CTkFont(size=12), text_color="gray60",
        ).grid(row=0, column=0, pady=(12, 0), padx=16)
        ctk.CTkLabel(
            card, text=text,
            font=ctk.CTkFont(size=20, weight="bold"),
            text_color=color,
        ).grid(row=1, column=0, pady=(4, 12), padx=16)
