import logging
import os
import sys
import customtkinter as ctk

# Ensure project root is on sys.path when run directly
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from database.db_manager import DatabaseManager
from database.query_client import QueryClient
from database.transaction_dao import TransactionDAO

from services.transaction_service import TransactionService
from services.summary_service import SummaryService
from services.report_service import ReportService
from services.export_service import ExportService

from ui.app_window import AppWindow
from utils.app_config import get_db_folder, get_log_level

logger = logging.getLogger(__name__)


def main():
    # ── Bootstrap: logging + DB folder from pre-DB config ────────────────────
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    db_folder = get_db_folder()

    # ── Database ─────────────────────────────────────────────────────────────
    db = DatabaseManager.open(db_folder=db_folder)
    client = QueryClient(db)

    # ── DAOs ─────────────────────────────────────────────────────────────────
    tx_dao = TransactionDAO(client)

    # ── Services ─────────────────────────────────────────────────────────────
    tx_svc = TransactionService(tx_dao)
    summary_svc = SummaryService(tx_dao)
    report_svc = ReportService(tx_dao)
    export_svc = ExportService(tx_dao)

    # ── Appearance ───────────────────────────────────────────────────────────
    appearance = db.get_setting("appearance_mode", "system")
    currency_symbol = db.get_setting("currency_symbol", "$")
    ctk.set_appearance_mode(appearance)
    ctk.set_default_color_theme("blue")

    # ── Launch UI ────────────────────────────────────────────────────────────
    logger.info("Starting with database %s", db.db_path)
    app = AppWindow(
        tx_service=tx_svc,
        summary_service=summary_svc,
        report_service=report_svc,
        export_service=export_svc,
        settings=db,
        currency_symbol=currency_symbol,
    )

    def on_close():
        db.close()
        app.destroy()

    app.protocol("WM_DELETE_WINDOW", on_close)
    app.mainloop()


if __name__ == "__main__":
    main()
