import logging
import customtkinter as ctk
import tkinter as tk
from matplotlib.figure import Figure
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg

from database.query_client import DataServiceError
from models.summary import CategorySlice
from services.report_service import ReportService
from utils.currency import format_currency
from utils.date_helpers import friendly_month

logger = logging.getLogger(__name__)


class ExpenseChartPanel(ctk.CTkFrame):
    """This month's expenses by category as a donut chart with a legend."""

    def __init__(
        self,
        master,
        report_service: ReportService,
        currency_symbol: str = "$",
        **kwargs,
    ):
        super().__init__(master, corner_radius=10, **kwargs)
        self._report_svc = report_service
        self._symbol = currency_symbol
        self.slices: list[CategorySlice] = []

        self.grid_columnconfigure(0, weight=3)
        self.grid_columnconfigure(1, weight=2)

        self._title_var = ctk.StringVar()
        ctk.CTkLabel(
            self, textvariable=self._title_var,
            font=ctk.CTkFont(size=16, weight="bold"),
        ).grid(row=0, column=0, columnspan=2, padx=16, pady=(14, 0), sticky="w")
        self._total_var = ctk.StringVar()
        ctk.CTkLabel(
            self, textvariable=self._total_var, text_color="gray60",
        ).grid(row=1, column=0, columnspan=2, padx=16, sticky="w")

        self._fig = Figure(figsize=(3.2, 3.2), dpi=80, tight_layout=True)
        self._ax = self._fig.add_subplot(111)
        self._canvas = FigureCanvasTkAgg(self._fig, master=self)
        self._canvas.get_tk_widget().grid(row=2, column=0, sticky="nsew", padx=8, pady=(4, 12))

        self._legend_frame = ctk.CTkFrame(self, fg_color="transparent")
        self._legend_frame.grid(row=2, column=1, sticky="nw", padx=8, pady=(12, 12))

        self._load()

    def refresh(self):
        self._load()

    def _load(self):
        self._title_var.set(f"Expenses by Category · {friendly_month()}")
        try:
            self.slices = self._report_svc.get_expense_breakdown()
        except DataServiceError:
            logger.exception("Fetching expense breakdown failed")
            return

        total = sum(s.value for s in self.slices)
        self._total_var.set(f"Total expenses: {format_currency(total, self._symbol)}")
        self._draw_chart()
        self._draw_legend()

    def _style_ax(self):
        is_dark = ctk.get_appearance_mode() == "Dark"
        bg = "#2b2b2b" if is_dark else "#dbdbdb"
        self._fig.patch.set_facecolor(bg)
        self._ax.set_facecolor(bg)

    def _draw_chart(self):
        self._ax.clear()
        self._style_ax()
        draw_donut(self._ax, self.slices)
        self._canvas.draw_idle()

    def _draw_legend(self):
        for w in self._legend_frame.winfo_children():
            w.destroy()
        for s in self.slices:
            row = ctk.CTkFrame(self._legend_frame, fg_color="transparent")
            row.pack(fill="x", pady=1)
            tk.Label(row, bg=s.color, width=2).pack(side="left", padx=(0, 6))
            ctk.CTkLabel(
                row,
                text=f"{s.name}: {format_currency(s.value, self._symbol)} ({s.percentage:.1f}%)",
                anchor="w", font=ctk.CTkFont(size=12),
            ).pack(side="left")


def draw_donut(ax, slices: list[CategorySlice]) -> bool:
    """Draw `slices` on `ax`; returns False when it drew the empty state instead.

    Zero-value slices get no wedge. When nothing is left (no expenses, or
    only zero-amount ones) the axes show a placeholder message.
    """
    ax.set_axis_off()
    drawn = [s for s in slices if s.value > 0]
    if not drawn:
        ax.text(0.5, 0.5, "No expenses this month", ha="center", va="center",
                transform=ax.transAxes, color="gray")
        return False

    ax.pie(
        [s.value for s in drawn],
        colors=[s.color for s in drawn],
        startangle=90,
        counterclock=False,
        wedgeprops={"width": 0.45, "edgecolor": "white"},
    )
    ax.set_aspect("equal")
    return True
