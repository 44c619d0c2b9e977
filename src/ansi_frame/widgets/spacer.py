"""Empty flexible space."""

from __future__ import annotations

from ansi_frame.widgets.base import BaseWidget
from ansi_frame.widgets.dimension import Dimension, DimensionSet


class Spacer(BaseWidget):
    """Takes up leftover space; unset dimensions default to Flex(1)."""

    def dimensions(self) -> DimensionSet:
        return super().dimensions().with_defaults(Dimension.flex(1), Dimension.flex(1))
