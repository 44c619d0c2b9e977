"""Size preferences for widgets."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar

_PARSE = re.compile(r"^\s*(?P<value>\d+(?:\.\d+)?)\s*(?P<unit>%|fr)?\s*$", re.IGNORECASE)


class DimensionKind(Enum):
    """How a dimension is resolved."""
    UNSET = "unset"       # No preference; the widget picks its default
    AUTO = "auto"         # Fit content, and resist being stretched
    CELLS = "cells"       # Fixed content size in cells
    FLEX = "flex"         # Share of leftover main-axis space
    PERCENT = "percent"   # Fraction of the nearest sized ancestor


@dataclass(frozen=True)
class Dimension:
    """
    A size preference on one axis.

    Values are clamped to >= 0. Cells values are content sizes: padding and
    border are added on top.
    """
    kind: DimensionKind = DimensionKind.UNSET
    value: float = 0

    UNSET: ClassVar["Dimension"]
    AUTO: ClassVar["Dimension"]

    def __post_init__(self) -> None:
        if self.value < 0:
            object.__setattr__(self, "value", 0)

    @classmethod
    def cells(cls, n: int) -> "Dimension":
        """Fixed size in cells."""
        return cls(DimensionKind.CELLS, int(n))

    @classmethod
    def flex(cls, weight: float = 1) -> "Dimension":
        """Proportional share of leftover space."""
        return cls(DimensionKind.FLEX, weight)

    @classmethod
    def percent(cls, pct: float) -> "Dimension":
        """Percentage of the parent's resolved size."""
        return cls(DimensionKind.PERCENT, pct)

    @classmethod
    def parse(cls, text: "str | int | Dimension | None") -> "Dimension":
        """
        Parse a dimension from a short textual form.

        Accepted: ``"auto"``, ``"12"`` (cells), ``"2fr"`` (flex),
        ``"50%"`` (percent), plain ints, None (unset), or a Dimension.

        Raises:
            ValueError: If the text is not a recognised dimension.
        """
        if text is None:
            return cls.UNSET
        if isinstance(text, Dimension):
            return text
        if isinstance(text, bool):
            raise ValueError(f"Invalid dimension: {text!r}")
        if isinstance(text, (int, float)):
            if text < 0:
                raise ValueError(f"Dimension must be >= 0, got {text}")
            if isinstance(text, float) and not text.is_integer():
                raise ValueError(f"Cell dimensions must be whole numbers, got {text!r}")
            return cls.cells(int(text))
        stripped = text.strip().lower()
        if stripped == "auto":
            return cls.AUTO
        if stripped in ("", "unset"):
            return cls.UNSET
        match = _PARSE.match(stripped)
        if match is None:
            raise ValueError(f"Invalid dimension: {text!r}")
        number = float(match.group("value"))
        unit = (match.group("unit") or "").lower()
        if unit == "%":
            return cls.percent(number)
        if unit == "fr":
            return cls.flex(number)
        if not number.is_integer():
            raise ValueError(f"Cell dimensions must be whole numbers, got {text!r}")
        return cls.cells(int(number))

    @property
    def is_unset(self) -> bool:
        return self.kind == DimensionKind.UNSET

    @property
    def is_auto(self) -> bool:
        return self.kind == DimensionKind.AUTO

    @property
    def is_cells(self) -> bool:
        return self.kind == DimensionKind.CELLS

    @property
    def is_flex(self) -> bool:
        return self.kind == DimensionKind.FLEX

    @property
    def is_percent(self) -> bool:
        return self.kind == DimensionKind.PERCENT

    @property
    def cells_value(self) -> int:
        return int(self.value) if self.is_cells else 0

    def __str__(self) -> str:
        if self.is_cells:
            return str(int(self.value))
        if self.is_flex:
            return f"{self.value:g}fr"
        if self.is_percent:
            return f"{self.value:g}%"
        return self.kind.value


Dimension.UNSET = Dimension(DimensionKind.UNSET)
Dimension.AUTO = Dimension(DimensionKind.AUTO)

# Module-level shortcuts
AUTO = Dimension.AUTO
UNSET = Dimension.UNSET
cells = Dimension.cells
flex = Dimension.flex
percent = Dimension.percent


@dataclass(frozen=True)
class DimensionSet:
    """All size preferences a widget advertises."""
    width: Dimension = field(default=Dimension.UNSET)
    height: Dimension = field(default=Dimension.UNSET)
    min_width: Dimension = field(default=Dimension.UNSET)
    max_width: Dimension = field(default=Dimension.UNSET)
    min_height: Dimension = field(default=Dimension.UNSET)
    max_height: Dimension = field(default=Dimension.UNSET)

    def with_defaults(self, width: Dimension, height: Dimension) -> "DimensionSet":
        """Fill unset width/height with the given defaults."""
        return DimensionSet(
            width if self.width.is_unset else self.width,
            height if self.height.is_unset else self.height,
            self.min_width,
            self.max_width,
            self.min_height,
            self.max_height,
        )

    def has_percent_bounds(self) -> bool:
        return any(
            d.is_percent
            for d in (self.min_width, self.max_width, self.min_height, self.max_height)
        )
