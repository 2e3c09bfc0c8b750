import logging
import math
import customtkinter as ctk
from tkinter import messagebox

from database.query_client import DataServiceError
from services.transaction_service import TransactionService
from ui.components.date_picker import DatePickerWidget
from utils.constants import KIND_COLORS
from utils.date_helpers import today_str

logger = logging.getLogger(__name__)


class TransactionForm(ctk.CTkFrame):
    """Inline form that records one income or expense transaction."""

    def __init__(
        self,
        master,
        tx_service: TransactionService,
        on_saved,           # callable, fired after a successful insert
        **kwargs,
    ):
        super().__init__(master, corner_radius=10, **kwargs)
        self._tx_svc = tx_service
        self._on_saved = on_saved
        self._submitting = False

        self.grid_columnconfigure(1, weight=1)

        ctk.CTkLabel(
            self, text="Add Transaction",
            font=ctk.CTkFont(size=16, weight="bold"),
        ).grid(row=0, column=0, columnspan=2, padx=16, pady=(14, 8), sticky="w")

        # Kind toggle
        self._kind_var = ctk.StringVar(value="expense")
        self._kind_toggle = ctk.CTkSegmentedButton(
            self,
            values=["expense", "income"],
            variable=self._kind_var,
            command=self._on_kind_change,
        )
        self._kind_toggle.grid(row=1, column=0, columnspan=2, padx=16, pady=4, sticky="ew")

        self._label("Amount:", 2)
        self._amount_var = ctk.StringVar()
        ctk.CTkEntry(
            self, textvariable=self._amount_var, width=160
        ).grid(row=2, column=1, padx=(0, 16), pady=4, sticky="ew")

        self._label("Category:", 3)
        self._category_var = ctk.StringVar()
        ctk.CTkEntry(
            self, textvariable=self._category_var, width=160
        ).grid(row=3, column=1, padx=(0, 16), pady=4, sticky="ew")

        self._label("Date:", 4)
        self._date_picker = DatePickerWidget(self, initial_date=today_str())
        self._date_picker.grid(row=4, column=1, padx=(0, 16), pady=4, sticky="w")

        self._label("Note:", 5)
        self._note_var = ctk.StringVar()
        ctk.CTkEntry(
            self, textvariable=self._note_var, width=160
        ).grid(row=5, column=1, padx=(0, 16), pady=4, sticky="ew")

        self._error_var = ctk.StringVar()
        ctk.CTkLabel(
            self, textvariable=self._error_var,
            text_color="#ef4444", wraplength=260, anchor="w",
        ).grid(row=6, column=0, columnspan=2, padx=16, sticky="ew")

        self._save_btn = ctk.CTkButton(self, text="Add Expense", command=self._on_save)
        self._save_btn.grid(row=7, column=0, columnspan=2, padx=16, pady=(4, 16), sticky="ew")
        self._on_kind_change()

    def _label(self, text, row):
        ctk.CTkLabel(self, text=text).grid(
            row=row, column=0, padx=(16, 8), pady=4, sticky="e"
        )

    def _on_kind_change(self, _value=None):
        kind = self._kind_var.get()
        self._save_btn.configure(
            text=f"Add {kind.title()}", fg_color=KIND_COLORS[kind]
        )

    def reset(self):
        self._kind_var.set("expense")
        self._amount_var.set("")
        self._category_var.set("")
        self._note_var.set("")
        self._date_picker.set(today_str())
        self._error_var.set("")
        self._on_kind_change()

    def _on_save(self):
        if self._submitting:
            return
        try:
            amount = float(self._amount_var.get())
        except ValueError:
            amount = math.nan
        if not math.isfinite(amount):
            self._error_var.set("Enter an amount.")
            return
        if amount < 0:
            self._error_var.set("Amount cannot be negative.")
            return
        if not self._date_picker.is_valid():
            self._error_var.set("Enter a date as YYYY-MM-DD.")
            return
        self._error_var.set("")

        self._submitting = True
        self._save_btn.configure(state="disabled", text="Adding…")
        try:
            self._tx_svc.create(
                kind=self._kind_var.get(),
                amount=amount,
                occurred_at=self._date_picker.get(),
                category=self._category_var.get(),
                note=self._note_var.get(),
            )
        except ValueError as e:
            self._error_var.set(str(e))
        except DataServiceError:
            logger.exception("Adding transaction failed")
            messagebox.showerror("Error", "Failed to add transaction")
        else:
            self.reset()
            self._on_saved()
        finally:
            self._submitting = False
            self._save_btn.configure(state="normal")
            self._on_kind_change()
