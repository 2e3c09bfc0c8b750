import logging
import customtkinter as ctk
from tkinter import messagebox

from database.query_client import DataServiceError
from models.transaction import Transaction
from services.transaction_service import TransactionService
from utils.constants import KIND_COLORS, KIND_ICONS, PAGE_SIZE
from utils.currency import format_amount
from utils.date_helpers import friendly_date
from utils.pagination import (
    clamp_page, has_next, has_prev, page_slice, page_window, showing_range, total_pages,
)

logger = logging.getLogger(__name__)


class TransactionListPanel(ctk.CTkFrame):
    """All transactions, newest first, three per page with delete buttons."""

    def __init__(
        self,
        master,
        tx_service: TransactionService,
        notify_refresh,     # callable(scope)
        currency_symbol: str = "$",
        **kwargs,
    ):
        super().__init__(master, corner_radius=10, **kwargs)
        self._tx_svc = tx_service
        self._notify_refresh = notify_refresh
        self._symbol = currency_symbol

        self._transactions: list[Transaction] = []
        self._page = 1
        self._deleting: set[int] = set()

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        ctk.CTkLabel(
            self, text="Recent Transactions",
            font=ctk.CTkFont(size=16, weight="bold"),
        ).grid(row=0, column=0, padx=16, pady=(14, 6), sticky="w")

        self._rows_frame = ctk.CTkFrame(self, fg_color="transparent")
        self._rows_frame.grid(row=1, column=0, sticky="nsew", padx=12)
        self._rows_frame.grid_columnconfigure(0, weight=1)

        self._pager = ctk.CTkFrame(self, fg_color="transparent")
        self._pager.grid(row=2, column=0, sticky="ew", padx=12, pady=(4, 12))

        self._load()

    def refresh(self):
        self._load()

    @property
    def page_count(self) -> int:
        return total_pages(len(self._transactions), PAGE_SIZE)

    def _load(self):
        try:
            self._transactions = self._tx_svc.list_all()
        except DataServiceError:
            logger.exception("Fetching transactions failed")
            return
        self._page = clamp_page(self._page, self.page_count)
        self._render()

    # ── Rendering ────────────────────────────────────────────────────────────
    def _render(self):
        for w in self._rows_frame.winfo_children():
            w.destroy()
        for w in self._pager.winfo_children():
            w.destroy()

        if not self._transactions:
            ctk.CTkLabel(
                self._rows_frame,
                text="🏦\nNo transactions yet\nAdd your first transaction!",
                text_color="gray60", justify="center",
            ).grid(row=0, column=0, pady=24)
            return

        for idx, tx in enumerate(page_slice(self._transactions, self._page, PAGE_SIZE)):
            self._add_row(idx, tx)

        if self.page_count > 1:
            self._render_pager()

    def _add_row(self, idx: int, tx: Transaction):
        color = KIND_COLORS.get(tx.kind, "gray")
        row = ctk.CTkFrame(self._rows_frame, fg_color=("gray92", "gray17"), corner_radius=8)
        row.grid(row=idx, column=0, sticky="ew", pady=3)
        row.grid_columnconfigure(1, weight=1)

        ctk.CTkLabel(
            row, text=KIND_ICONS.get(tx.kind, ""), width=32, height=32,
            fg_color=color, text_color="white", corner_radius=16,
        ).grid(row=0, column=0, rowspan=2, padx=(10, 8), pady=8)

        head = ctk.CTkFrame(row, fg_color="transparent")
        head.grid(row=0, column=1, sticky="w", pady=(6, 0))
        ctk.CTkLabel(head, text=friendly_date(tx.occurred_at), anchor="w").pack(side="left")
        if tx.category:
            ctk.CTkLabel(
                head, text=tx.category, corner_radius=8,
                fg_color=("gray85", "gray25"), text_color=color,
                font=ctk.CTkFont(size=11), padx=6,
            ).pack(side="left", padx=(8, 0))

        if tx.note:
            ctk.CTkLabel(
                row, text=tx.note, anchor="w", text_color="gray60",
                font=ctk.CTkFont(size=11),
            ).grid(row=1, column=1, sticky="w", pady=(0, 6))

        ctk.CTkLabel(
            row, text=format_amount(tx.amount, tx.kind, self._symbol),
            text_color=color, font=ctk.CTkFont(size=15, weight="bold"),
            anchor="e", width=110,
        ).grid(row=0, column=2, rowspan=2, padx=6)

        busy = tx.id in self._deleting
        ctk.CTkButton(
            row, text="…" if busy else "Del", width=40, height=26,
            fg_color="#ef4444", hover_color="#dc2626",
            state="disabled" if busy else "normal",
            command=lambda t=tx: self._delete_tx(t),
        ).grid(row=0, column=3, rowspan=2, padx=(0, 10))

    def _render_pager(self):
        pages = self.page_count
        first, last = showing_range(self._page, len(self._transactions), PAGE_SIZE)
        ctk.CTkLabel(
            self._pager,
            text=f"Showing {first} - {last} of {len(self._transactions)} transactions",
            text_color="gray60", font=ctk.CTkFont(size=11),
        ).pack(side="left")

        nav = ctk.CTkFrame(self._pager, fg_color="transparent")
        nav.pack(side="right")
        ctk.CTkButton(
            nav, text="←", width=30,
            state="normal" if has_prev(self._page) else "disabled",
            command=lambda: self._go_to(self._page - 1),
        ).pack(side="left", padx=2)
        for n in page_window(self._page, pages):
            current = n == self._page
            ctk.CTkButton(
                nav, text=str(n), width=30,
                fg_color=None if current else "transparent",
                border_width=0 if current else 1,
                text_color=None if current else ("gray10", "gray90"),
                command=lambda p=n: self._go_to(p),
            ).pack(side="left", padx=2)
        ctk.CTkButton(
            nav, text="→", width=30,
            state="normal" if has_next(self._page, pages) else "disabled",
            command=lambda: self._go_to(self._page + 1),
        ).pack(side="left", padx=2)

    def _go_to(self, page: int):
        self._page = clamp_page(page, self.page_count)
        self._render()

    # ── Delete ───────────────────────────────────────────────────────────────
    def _delete_tx(self, tx: Transaction):
        if tx.id in self._deleting:
            return
        self._deleting.add(tx.id)
        self._render()
        self.update_idletasks()
        try:
            self._tx_svc.delete(tx.id)
        except DataServiceError:
            logger.exception("Deleting transaction #%s failed", tx.id)
            messagebox.showerror("Error", "Failed to delete transaction. Please try again.")
            self._deleting.discard(tx.id)
            self._render()
            return
        self._deleting.discard(tx.id)
        self._notify_refresh("transaction")
