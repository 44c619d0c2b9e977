"""Text leaf widget."""

from __future__ import annotations

from ansi_frame.layout.types import Constraints, is_bounded
from ansi_frame.text import measure
from ansi_frame.widgets.base import BaseWidget, BuildContext


class Label(BaseWidget):
    """
    Static text, possibly multi-line and ANSI-styled.

    Measured by visible width. With ``wrap`` set, lines longer than the
    available width are hard-wrapped, which grows the label's height.
    """

    def __init__(self, text: str = "", *, wrap: bool = False, **kwargs) -> None:
        super().__init__(**kwargs)
        self.text = text
        self.wrap = wrap

    def measure(self, ctx: BuildContext, constraints: Constraints) -> tuple[int, int]:
        limit = 0
        if self.wrap and is_bounded(constraints.max_width):
            limit = constraints.max_width
        return measure(self.text, limit)

    def __repr__(self) -> str:
        return f"Label({self.text!r})"
