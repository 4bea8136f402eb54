"""Tkinter desktop window: paste or open a page, extract, copy.

WHY: The people who copy directions into chat messages and itineraries
are not going to run a CLI. A small window with a paste box, an Extract
button, and a Copy button covers the whole workflow.

HOW: A single RouteCopierApp class builds the UI: an input box (pasted
panel text or page markup), a read-only output box, and a button row.
Extraction runs synchronously on the main thread: the core is a single
bounded pass, so there is nothing to wait on. Copy puts the output on
the Tk clipboard and flashes "Copied!" for two seconds.

RULES:
- The output box is read-only (state=disabled outside updates)
- HTML input goes through the source locator; text goes to the core
- Copy never modifies the output text
- The status label clears itself after _STATUS_CLEAR_MS
"""

from __future__ import annotations

import tkinter as tk
from pathlib import Path
from tkinter import filedialog, messagebox, ttk
from typing import Optional

from route_copier.bridge.handler import extract_route
from route_copier.bridge.models import RouteRequest
from route_copier.core.pipeline import normalize_route
from route_copier.locators import looks_like_html, text_to_lines

_WINDOW_TITLE = "Route Copier"
_WINDOW_MIN_WIDTH = 560
_WINDOW_MIN_HEIGHT = 480
_PAD = 8
_STATUS_CLEAR_MS = 2000


def extract_text(raw: str) -> str:
    """Turn pasted text or page markup into route text."""
    if looks_like_html(raw):
        return extract_route(raw, RouteRequest(html=raw))
    return normalize_route(text_to_lines(raw))


class RouteCopierApp:
    """Main tkinter application window."""

    def __init__(self, root: tk.Tk) -> None:
        self._root = root
        self._root.title(_WINDOW_TITLE)
        self._root.minsize(_WINDOW_MIN_WIDTH, _WINDOW_MIN_HEIGHT)
        self._clear_job: Optional[str] = None
        self._build_ui()

    # ------------------------------------------------------------------
    # UI Construction
    # ------------------------------------------------------------------

    def _build_ui(self) -> None:
        main = ttk.Frame(self._root, padding=_PAD)
        main.pack(fill=tk.BOTH, expand=True)

        # --- Input ---
        in_frame = ttk.LabelFrame(main, text="Directions (paste text or open a saved page)", padding=_PAD)
        in_frame.pack(fill=tk.BOTH, expand=True, pady=(0, _PAD))
        self._input = tk.Text(in_frame, height=10, wrap=tk.WORD)
        self._input.pack(fill=tk.BOTH, expand=True)

        # --- Buttons ---
        btn_row = ttk.Frame(main)
        btn_row.pack(fill=tk.X, pady=(0, _PAD))
        ttk.Button(btn_row, text="Open Page...", command=self._open_file).pack(side=tk.LEFT)
        ttk.Button(btn_row, text="Extract", command=self._extract).pack(side=tk.LEFT, padx=(4, 0))
        self._copy_btn = ttk.Button(btn_row, text="Copy", command=self._copy)
        self._copy_btn.pack(side=tk.RIGHT)
        self._status = ttk.Label(btn_row, text="", foreground="green")
        self._status.pack(side=tk.RIGHT, padx=(0, _PAD))

        # --- Output ---
        out_frame = ttk.LabelFrame(main, text="Route", padding=_PAD)
        out_frame.pack(fill=tk.BOTH, expand=True)
        self._output = tk.Text(out_frame, height=10, wrap=tk.WORD, state=tk.DISABLED)
        self._output.pack(fill=tk.BOTH, expand=True)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def _open_file(self) -> None:
        path = filedialog.askopenfilename(
            title="Open saved map page",
            filetypes=[("Web pages", "*.html *.htm"), ("Text", "*.txt"), ("All files", "*.*")],
        )
        if not path:
            return
        try:
            content = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            messagebox.showerror("Open failed", str(e))
            return
        self._input.delete("1.0", tk.END)
        self._input.insert("1.0", content)
        self._extract()

    def _extract(self) -> None:
        raw = self._input.get("1.0", tk.END)
        self._set_output(extract_text(raw))

    def _set_output(self, text: str) -> None:
        self._output.configure(state=tk.NORMAL)
        self._output.delete("1.0", tk.END)
        self._output.insert("1.0", text)
        self._output.configure(state=tk.DISABLED)

    def _copy(self) -> None:
        text = self._output.get("1.0", "end-1c")
        self._root.clipboard_clear()
        self._root.clipboard_append(text)
        self._status.configure(text="Copied!")
        if self._clear_job is not None:
            self._root.after_cancel(self._clear_job)
        self._clear_job = self._root.after(_STATUS_CLEAR_MS, self._clear_status)

    def _clear_status(self) -> None:
        self._status.configure(text="")
        self._clear_job = None


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main() -> None:
    """Launch the Tkinter GUI. Blocks until the window is closed."""
    root = tk.Tk()
    RouteCopierApp(root)
    root.mainloop()


if __name__ == "__main__":
    main()
