import customtkinter as ctk
from database.db_manager import DatabaseManager
from services.transaction_service import TransactionService
from services.summary_service import SummaryService
from services.report_service import ReportService
from services.export_service import ExportService
from ui.components.transaction_form import TransactionForm
from ui.panels.transaction_list import TransactionListPanel
from ui.panels.monthly_summary import MonthlySummaryPanel
from ui.panels.expense_chart import ExpenseChartPanel
from ui.panels.data_export import DataExportPanel
from utils.constants import APP_NAME, APP_WIDTH, APP_HEIGHT


_REFRESH_SCOPES: dict[str, set[str]] = {
    "transaction": {"list", "summary", "chart"},
    "appearance":  {"chart"},
}


class AppWindow(ctk.CTk):
    def __init__(
        self,
        tx_service: TransactionService,
        summary_service: SummaryService,
        report_service: ReportService,
        export_service: ExportService,
        settings: DatabaseManager | None = None,
        currency_symbol: str = "$",
        **kwargs,
    ):
        super().__init__(**kwargs)
        self._tx_svc = tx_service
        self._summary_svc = summary_service
        self._report_svc = report_service
        self._export_svc = export_service
        self._settings = settings
        self._symbol = currency_symbol
        self._panels: dict[str, object] = {}

        self.title(APP_NAME)
        self.minsize(APP_WIDTH, APP_HEIGHT)
        self.geometry(f"{APP_WIDTH}x{APP_HEIGHT}")

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        self._build_header()
        self._build_body()

    def _build_header(self):
        bar = ctk.CTkFrame(self, fg_color=("gray85", "gray15"), corner_radius=0, height=52)
        bar.grid(row=0, column=0, sticky="ew")
        bar.grid_propagate(False)
        ctk.CTkLabel(
            bar, text=f"💰 {APP_NAME}",
            font=ctk.CTkFont(size=20, weight="bold"),
        ).pack(side="left", padx=16, pady=10)

        appearance = self._settings.get_setting("appearance_mode", "system") if self._settings else "system"
        self._appearance_var = ctk.StringVar(value=appearance.title())
        ctk.CTkOptionMenu(
            bar,
            values=["System", "Light", "Dark"],
            variable=self._appearance_var,
            command=self._on_appearance_change,
            width=110,
        ).pack(side="right", padx=16, pady=10)
        ctk.CTkLabel(bar, text="Appearance:").pack(side="right")

    def _on_appearance_change(self, display: str):
        key = display.lower()
        if self._settings:
            self._settings.set_setting("appearance_mode", key)
        ctk.set_appearance_mode(key)
        self.notify_refresh("appearance")

    def _build_body(self):
        body = ctk.CTkScrollableFrame(self, fg_color="transparent")
        body.grid(row=1, column=0, sticky="nsew", padx=8, pady=8)
        body.grid_columnconfigure(0, weight=2)
        body.grid_columnconfigure(1, weight=3)

        form = TransactionForm(
            body,
            tx_service=self._tx_svc,
            on_saved=lambda: self.notify_refresh("transaction"),
        )
        form.grid(row=0, column=0, sticky="nsew", padx=8, pady=8)

        self._register("list", TransactionListPanel(
            body,
            tx_service=self._tx_svc,
            notify_refresh=self.notify_refresh,
            currency_symbol=self._symbol,
        )).grid(row=0, column=1, sticky="nsew", padx=8, pady=8)

        self._register("summary", MonthlySummaryPanel(
            body,
            summary_service=self._summary_svc,
            currency_symbol=self._symbol,
        )).grid(row=1, column=0, columnspan=2, sticky="ew", padx=8, pady=8)

        self._register("chart", ExpenseChartPanel(
            body,
            report_service=self._report_svc,
            currency_symbol=self._symbol,
        )).grid(row=2, column=0, columnspan=2, sticky="ew", padx=8, pady=8)

        DataExportPanel(
            body, export_service=self._export_svc,
        ).grid(row=3, column=0, columnspan=2, sticky="ew", padx=8, pady=8)

    def _register(self, name: str, panel):
        self._panels[name] = panel
        return panel

    # ── Refresh ──────────────────────────────────────────────────────────────
    def notify_refresh(self, scope: str = "transaction"):
        """Tell every panel subscribed to `scope` to redraw. Unknown scopes refresh all."""
        names = _REFRESH_SCOPES.get(scope, set(self._panels))
        for name, panel in self._panels.items():
            if name in names:
                panel.refresh()
