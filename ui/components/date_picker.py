import customtkinter as ctk
from tkcalendar import Calendar
import tkinter as tk
from tkinter import ttk
from utils.date_helpers import parse_date, format_date, today_str
from datetime import date


class DatePickerWidget(ctk.CTkFrame):
    """ISO date entry (YYYY-MM-DD) with a calendar popup button.

    .get() returns the normalised YYYY-MM-DD string, or the raw text when it
    does not parse (check .is_valid() first).
    """

    def __init__(self, master, initial_date: str | None = None, **kwargs):
        super().__init__(master, fg_color="transparent", **kwargs)
        self.grid_columnconfigure(0, weight=1)
        self._popup: ctk.CTkToplevel | None = None

        self._var = tk.StringVar(value=initial_date or today_str())

        self._entry = ctk.CTkEntry(self, textvariable=self._var, width=110)
        self._entry.grid(row=0, column=0, sticky="ew")
        self._entry.bind("<FocusOut>", self._on_focus_out)
        self._entry.bind("<Return>", self._on_focus_out)

        self._btn = ctk.CTkButton(
            self, text="📅", width=32, command=self._open_popup
        )
        self._btn.grid(row=0, column=1, padx=(4, 0))

    def get(self) -> str:
        raw = self._var.get().strip()
        d = parse_date(raw)
        return format_date(d) if d else raw

    def set(self, date_str: str):
        self._var.set(date_str or "")
        self._reset_border()

    def is_valid(self) -> bool:
        return parse_date(self._var.get()) is not None

    def _on_focus_out(self, _event=None):
        raw = self._var.get().strip()
        if not raw:
            self._reset_border()
            return
        d = parse_date(raw)
        if d:
            self._var.set(format_date(d))
            self._reset_border()
        else:
            self._entry.configure(border_color="#ef4444")

    def _reset_border(self):
        self._entry.configure(border_color=("gray65", "gray35"))

    def _open_popup(self):
        if self._popup and self._popup.winfo_exists():
            self._popup.destroy()
            self._popup = None
            return

        popup = ctk.CTkToplevel(self)
        popup.overrideredirect(True)
        popup.resizable(False, False)
        self._popup = popup

        dark = ctk.get_appearance_mode() == "Dark"
        bg = "#2b2b2b" if dark else "#ffffff"
        fg = "#ffffff" if dark else "#000000"
        style = ttk.Style(popup)
        style.theme_use("default")
        style.configure("Calendar.Treeview", background=bg, foreground=fg, fieldbackground=bg)

        current = parse_date(self._var.get()) or date.today()
        cal = Calendar(
            popup,
            selectmode="day",
            year=current.year,
            month=current.month,
            day=current.day,
            date_pattern="yyyy-mm-dd",
            background=bg,
            foreground=fg,
            headersbackground=bg,
            headersforeground=fg,
            selectbackground="#1f6aa5",
            weekendbackground=bg,
            weekendforeground=fg,
            othermonthforeground="gray60",
            bordercolor=bg,
        )
        cal.pack(padx=4, pady=4)
        cal.bind("<<CalendarSelected>>", lambda e: self._on_date_selected(cal, popup))

        # Below the entry
        self._entry.update_idletasks()
        x = self._entry.winfo_rootx()
        y = self._entry.winfo_rooty() + self._entry.winfo_height() + 2
        popup.geometry(f"+{x}+{y}")

        popup.bind("<FocusOut>", lambda e: self._maybe_close(popup))

    def _on_date_selected(self, cal, popup):
        self._var.set(cal.get_date())
        self._reset_border()
        popup.destroy()
        self._popup = None

    def _maybe_close(self, popup):
        if not popup.winfo_exists():
            return
        try:
            focused = popup.focus_get()
        except KeyError:
            # Tk raises for focus inside widgets tkinter did not create
            focused = None
        if focused is None or not str(focused).startswith(str(popup)):
            popup.destroy()
            self._popup = None
