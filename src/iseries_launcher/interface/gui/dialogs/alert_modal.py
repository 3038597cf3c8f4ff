from __future__ import annotations

"""
Blocking Alert Dialog.

Small modal window used by the launcher to tell the user about missing
files and runtime problems before the application starts. The call
blocks until the user dismisses the window.
"""

import customtkinter as ctk

from iseries_launcher.utils.i18n import i18n

_LEVEL_COLORS = {
    "warning": "#E0A040",
    "error": "#E04F5F",
}


def show_alert(title: str, message: str, level: str = "warning") -> None:
    """
    Display a message in a modal window and wait for it to be closed.

    Args:
        title: Window title.
        message: Text shown to the user.
        level: 'warning' or 'error', selects the header color.
    """
    root = ctk.CTk()
    root.withdraw()

    toplevel = ctk.CTkToplevel(root)
    toplevel.title(title)
    toplevel.geometry("460x180")
    toplevel.resizable(False, False)
    toplevel.attributes("-topmost", True)

    ctk.CTkLabel(
        toplevel,
        text=title,
        font=ctk.CTkFont(size=15, weight="bold"),
        text_color=_LEVEL_COLORS.get(level, _LEVEL_COLORS["warning"]),
    ).pack(pady=(18, 6))

    ctk.CTkLabel(toplevel, text=message, wraplength=420, justify="center").pack(
        fill="both", expand=True, padx=20
    )

    ctk.CTkButton(
        toplevel,
        text=i18n.t("app.ok"),
        width=100,
        command=root.destroy,
    ).pack(pady=(6, 16))

    toplevel.protocol("WM_DELETE_WINDOW", root.destroy)
    toplevel.grab_set()
    root.mainloop()
