from __future__ import annotations

import html
from dataclasses import dataclass
from typing import List, Literal

import ipywidgets as w


Level = Literal["info", "warning", "error"]

_COLORS = {
    "error": "#b00020",    # red
    "warning": "#b26a00",  # orange
    "info": "#222222",     # near-black
}


@dataclass
class _Entry:
    level: Level
    message: str
    count: int = 1


class HtmlLog:
    """
    Panel log rendered into a single HTML widget.

    Every visualizer owns one. Recompute summaries, discoveries and rejected inputs
    are written here instead of being printed, so the notebook output area never
    fills up while a slider is dragged.

    Features:
      - severity coloring: warnings in orange, errors in red
      - coalescing of consecutive identical messages (shows xN)
      - bounded history (drops oldest entries beyond max_entries)
    """

    def __init__(self, *, title: str | None = None, height_px: int = 160, max_entries: int = 500) -> None:
        self._entries: List[_Entry] = []
        self._height_px = int(height_px)
        self._max_entries = int(max_entries)
        self.widget = w.HTML()
        if title:
            self.panel = w.VBox([w.HTML(f"<b>{html.escape(str(title))}</b>"), self.widget])
        else:
            self.panel = self.widget
        self.clear()

    @property
    def entries(self) -> List[tuple[Level, str, int]]:
        return [(e.level, e.message, e.count) for e in self._entries]

    def clear(self) -> None:
        self._entries.clear()
        self._render()

    def info(self, message: str) -> None:
        self._add("info", message)

    def warning(self, message: str) -> None:
        self._add("warning", message)

    def error(self, message: str) -> None:
        self._add("error", message)

    def exception(self, context: str, exc: BaseException) -> None:
        self._add("error", f"ERROR: {context}: {exc!r}")

    # -------------------------
    # Internals
    # -------------------------
    def _add(self, level: Level, message: str) -> None:
        msg = "" if message is None else str(message)

        if self._entries and self._entries[-1].level == level and self._entries[-1].message == msg:
            self._entries[-1].count += 1
            self._render()
            return

        self._entries.append(_Entry(level=level, message=msg, count=1))
        if len(self._entries) > self._max_entries:
            self._entries = self._entries[-self._max_entries :]
        self._render()

    def _render(self) -> None:
        rows = []
        for e in self._entries:
            suffix = f" (x{e.count})" if e.count > 1 else ""
            rows.append(
                f"<div style='color:{_COLORS[e.level]}; white-space:pre-wrap; font-family:monospace;'>"
                f"{html.escape(e.message)}{html.escape(suffix)}</div>"
            )

        inner = "".join(rows) if rows else "<div style='color:#666;'>Log is empty.</div>"
        self.widget.value = (
            f"<div style='border:1px solid #ddd; padding:8px; height:{self._height_px}px; "
            f"overflow-y:auto; background:#fff;'>{inner}</div>"
        )
