import logging
import customtkinter as ctk
from tkinter import filedialog, messagebox

from database.query_client import DataServiceError
from services.export_service import EmptyExportError, ExportService, export_filename, to_json

logger = logging.getLogger(__name__)


class DataExportPanel(ctk.CTkFrame):
    """Export buttons: CSV or JSON of every transaction, written where the user picks."""

    def __init__(self, master, export_service: ExportService, **kwargs):
        super().__init__(master, corner_radius=10, **kwargs)
        self._export_svc = export_service
        self.is_exporting = False

        self.grid_columnconfigure((0, 1), weight=1)

        ctk.CTkLabel(
            self, text="Export Data",
            font=ctk.CTkFont(size=16, weight="bold"),
        ).grid(row=0, column=0, columnspan=2, padx=16, pady=(14, 0), sticky="w")
        ctk.CTkLabel(
            self, text="Download all your transaction data for backup or analysis",
            text_color="gray60", anchor="w",
        ).grid(row=1, column=0, columnspan=2, padx=16, pady=(0, 8), sticky="w")

        self._csv_btn = ctk.CTkButton(
            self, text="Export as CSV", command=self._export_csv,
        )
        self._csv_btn.grid(row=2, column=0, padx=(16, 6), pady=(0, 4), sticky="ew")
        self._json_btn = ctk.CTkButton(
            self, text="Export as JSON", command=self._export_json,
        )
        self._json_btn.grid(row=2, column=1, padx=(6, 16), pady=(0, 4), sticky="ew")

        self._status_var = ctk.StringVar()
        ctk.CTkLabel(
            self, textvariable=self._status_var,
            text_color="#22c55e", font=ctk.CTkFont(size=11), anchor="w",
        ).grid(row=3, column=0, columnspan=2, padx=16, pady=(0, 12), sticky="w")

    def _export_csv(self):
        self._run_export("csv", "CSV files", self._export_svc.export_csv)

    def _export_json(self):
        self._run_export("json", "JSON files", lambda: to_json(self._export_svc.export_json()))

    def _set_exporting(self, busy: bool):
        self.is_exporting = busy
        state = "disabled" if busy else "normal"
        self._csv_btn.configure(state=state, text="Exporting…" if busy else "Export as CSV")
        self._json_btn.configure(state=state, text="Exporting…" if busy else "Export as JSON")

    def _run_export(self, ext: str, label: str, build):
        if self.is_exporting:
            return
        self._set_exporting(True)
        try:
            content = build()
            path = filedialog.asksaveasfilename(
                title=f"Export as {ext.upper()}",
                initialfile=export_filename(ext),
                defaultextension=f".{ext}",
                filetypes=[(label, f"*.{ext}"), ("All files", "*.*")],
            )
            if not path:
                return
            self._export_svc.write(path, content)
            self._status_var.set(f"Exported to {path}")
        except EmptyExportError as e:
            messagebox.showinfo("Export", str(e))
        except (DataServiceError, OSError):
            logger.exception("Export to %s failed", ext)
            messagebox.showerror("Export Failed", "Failed to export data")
        finally:
            self._set_exporting(False)
