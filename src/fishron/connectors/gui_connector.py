# src/fishron/connectors/gui_connector.py

"""
Chat-window front-end (tkinter).

Layout: a scrollable dialog history on top, an entry field and a Send button
below. The Send button and the Enter key both go through handle_user_input(),
which forwards the text verbatim to core.chat.respond().
"""

from __future__ import annotations

import logging
import tkinter as tk
from tkinter import ttk
from tkinter.scrolledtext import ScrolledText

from ..core import replies
from ..core.chat import respond
from ..core.state import AppState

logger = logging.getLogger(__name__)

# Delay between showing the farewell and closing the window.
CLOSE_DELAY_MS = 800


class ChatWindow:
    def __init__(self, root: tk.Tk, state: AppState) -> None:
        self.root = root
        self.state = state
        settings = state.settings
        self.app_name = str(getattr(settings, "app_name", "Fishron"))

        root.title(self.app_name)
        root.geometry(f"{getattr(settings, 'gui_width', 400)}x{getattr(settings, 'gui_height', 600)}")
        root.resizable(False, False)
        root.protocol("WM_DELETE_WINDOW", self.close)

        self.dialog = ScrolledText(root, wrap="word", state=tk.DISABLED, padx=6, pady=6)
        self.dialog.tag_configure("user", justify=tk.RIGHT, foreground="#1a4f8b", spacing3=6)
        self.dialog.tag_configure("bot", justify=tk.LEFT, spacing3=6)
        self.dialog.pack(fill=tk.BOTH, expand=True, padx=1, pady=(1, 0))

        bottom = ttk.Frame(root, padding=1)
        bottom.pack(fill=tk.X)

        self.user_input = ttk.Entry(bottom)
        self.user_input.pack(side=tk.LEFT, fill=tk.X, expand=True)
        self.user_input.bind("<Return>", lambda e: self.handle_user_input())
        self.user_input.focus_set()

        self.send_button = ttk.Button(bottom, text="Send", width=7, command=self.handle_user_input)
        self.send_button.pack(side=tk.RIGHT)

        self._append(replies.welcome(self.app_name), "bot")

    def _append(self, text: str, tag: str) -> None:
        speaker = "You" if tag == "user" else self.app_name
        self.dialog.configure(state=tk.NORMAL)
        self.dialog.insert(tk.END, f"{speaker}:\n{text}\n\n", tag)
        self.dialog.configure(state=tk.DISABLED)
        self.dialog.see(tk.END)

    def handle_user_input(self) -> None:
        if self.state.exiting:
            return
        text = self.user_input.get()
        if not text.strip():
            return

        try:
            result = respond(self.state, text)
            reply = result.message
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        self._append(text, "user")
        self._append(reply, "bot")
        self.user_input.delete(0, tk.END)

        if self.state.exiting:
            self.user_input.configure(state=tk.DISABLED)
            self.send_button.configure(state=tk.DISABLED)
            self.root.after(CLOSE_DELAY_MS, self.close)

    def close(self) -> None:
        logger.info("Chat window closing.")
        self.root.destroy()


def run_gui(state: AppState) -> None:
    """Open the chat window and block until it is closed."""
    root = tk.Tk()
    ChatWindow(root, state)
    logger.info("GUI connector started (tasks=%d).", state.tasks.size())
    try:
        root.mainloop()
    except KeyboardInterrupt:
        logger.info("GUI KeyboardInterrupt, exiting.")
    logger.info("GUI connector finished.")
