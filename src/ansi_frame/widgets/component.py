"""User-defined composite widgets."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ansi_frame.widgets.base import BaseWidget, BuildContext, Widget


class Component(BaseWidget, ABC):
    """
    A widget defined by the subtree its ``build`` returns.

    Cells read inside ``build`` subscribe this component's node, so
    writing them rebuilds the frame. Keep state that must outlive a rebuild
    in ``ctx.state`` / ``ctx.signal`` rather than on the instance.

    Example:
        >>> class Counter(Component):
        ...     def build(self, ctx):
        ...         count = ctx.signal(0)
        ...         return Label(f"count: {count.get()}")
    """

    @abstractmethod
    def build(self, ctx: BuildContext) -> Widget:
        """Return the subtree this component stands for."""
