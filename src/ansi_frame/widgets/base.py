"""Base widget protocol, capability defaults and the build context."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Callable, Optional, Protocol, TypeVar, runtime_checkable

from ansi_frame.layout.node import LayoutNode
from ansi_frame.layout.types import Constraints
from ansi_frame.reactive.signal import Signal
from ansi_frame.reactive.state import StateStore
from ansi_frame.reactive.tracker import BuildTracker, get_tracker
from ansi_frame.widgets.dimension import Dimension, DimensionSet
from ansi_frame.widgets.style import Style

if TYPE_CHECKING:
    from ansi_frame.render.cache import LayoutMetrics

logger = logging.getLogger(__name__)

S = TypeVar("S")
T = TypeVar("T")

# Bound on build() chains (component returning component returning ...).
MAX_BUILD_DEPTH = 64


@runtime_checkable
class Widget(Protocol):
    """Capabilities a widget offers to the framework."""

    style: Style

    def build(self, ctx: BuildContext) -> Widget:
        """Return the widget to lay out in place of this one (often self)."""
        ...

    def build_layout_node(self, ctx: BuildContext) -> Optional[LayoutNode]:
        """Contribute a layout node, or None to get a generic box."""
        ...

    def measure(self, ctx: BuildContext, constraints: Constraints) -> tuple[int, int]:
        """Natural content size within content-box constraints."""
        ...

    def dimensions(self) -> DimensionSet:
        """Size preferences."""
        ...

    def child_widgets(self) -> list[Widget]:
        """Children in the same order as the layout node's children."""
        ...

    def on_layout(self, ctx: BuildContext, metrics: LayoutMetrics) -> None:
        """Observe the resolved layout of this widget."""
        ...


class BuildSession:
    """
    Per-frame build state shared by every BuildContext in one pass.

    Resolving a widget runs its ``build`` chain under the tracker with the
    node mounted at the widget's id, so cells read during the build
    subscribe that node. Results are memoized by path for the frame.
    """

    def __init__(
        self,
        tracker: Optional[BuildTracker] = None,
        state: Optional[StateStore] = None,
    ) -> None:
        self.tracker = tracker or get_tracker()
        self.state = state if state is not None else StateStore()
        self._chains: dict[str, tuple[Widget, ...]] = {}
        self._mounted: dict[str, None] = {}

    @property
    def mounted(self) -> list[str]:
        """Widget ids built during this session."""
        return list(self._mounted)

    def resolve(self, widget: Widget, ctx: BuildContext) -> Widget:
        return self.chain(widget, ctx)[-1]

    def chain(self, widget: Widget, ctx: BuildContext) -> tuple[Widget, ...]:
        """Every widget the build chain at ctx passed through, ending with the built one."""
        path = ctx.auto_id
        cached = self._chains.get(path)
        if cached is not None:
            return cached
        widget_id = ctx.widget_id
        if widget_id in self._mounted:
            logger.warning("duplicate widget id %r at %s", widget_id, path)
        node = self.tracker.registry.node_for(widget_id)
        steps = [widget]
        with self.tracker.building(node):
            for _ in range(MAX_BUILD_DEPTH):
                built = steps[-1].build(ctx)
                if built is steps[-1]:
                    break
                steps.append(built)
            else:
                logger.warning("build chain at %s exceeded %d steps", path, MAX_BUILD_DEPTH)
        node.dirty = False
        self._mounted[widget_id] = None
        self._chains[path] = tuple(steps)
        return self._chains[path]


@dataclass(frozen=True)
class BuildContext:
    """Where in the widget tree a build is happening."""
    session: BuildSession
    path: tuple[int, ...] = (0,)
    key: Optional[str] = None

    @property
    def auto_id(self) -> str:
        """Stable identity derived from the path, e.g. ``"0.2.1"``."""
        return ".".join(str(i) for i in self.path)

    @property
    def widget_id(self) -> str:
        """The widget's explicit key if it has one, else ``auto_id``.

        Node subscriptions and ``state`` are keyed on this, so a keyed
        widget keeps its state when its siblings are reordered.
        """
        return self.key or self.auto_id

    def push_child(self, index: int) -> BuildContext:
        return BuildContext(self.session, self.path + (index,))

    def for_widget(self, widget: Widget) -> BuildContext:
        """This context, carrying widget's key if it has one."""
        key = getattr(widget, "key", None)
        if key is None or key == self.key:
            return self
        return replace(self, key=key)

    def resolve(self, widget: Widget) -> Widget:
        return self.session.resolve(widget, self.for_widget(widget))

    def resolve_chain(self, widget: Widget) -> tuple[Widget, ...]:
        return self.session.chain(widget, self.for_widget(widget))

    def state(self, factory: Callable[[], S], key: Optional[str] = None) -> S:
        """Persistent state for this widget, created on first use."""
        return self.session.state.get_or_create(key or self.widget_id, factory)

    def signal(self, initial: T, key: Optional[str] = None) -> Signal[T]:
        """A Signal that survives rebuilds of this widget."""
        return self.state(lambda: Signal(initial), key)


class BaseWidget:
    """Base class with the default behavior for every capability."""

    def __init__(
        self,
        *,
        width: "str | int | Dimension | None" = None,
        height: "str | int | Dimension | None" = None,
        style: Optional[Style] = None,
        key: Optional[str] = None,
    ) -> None:
        self.width = Dimension.parse(width)
        self.height = Dimension.parse(height)
        self.style = style or Style()
        self.key = key

    def build(self, ctx: BuildContext) -> Widget:
        """Default: the widget lays itself out."""
        return self

    def build_layout_node(self, ctx: BuildContext) -> Optional[LayoutNode]:
        """Default: no custom node; a generic box measured by ``measure``."""
        return None

    def measure(self, ctx: BuildContext, constraints: Constraints) -> tuple[int, int]:
        """Default: no content."""
        return 0, 0

    def dimensions(self) -> DimensionSet:
        return DimensionSet(
            self.width,
            self.height,
            self.style.min_width,
            self.style.max_width,
            self.style.min_height,
            self.style.max_height,
        )

    def child_widgets(self) -> list[Widget]:
        return []

    def on_layout(self, ctx: BuildContext, metrics: LayoutMetrics) -> None:
        """Called after this widget's layout is resolved for the frame."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(width={self.width}, height={self.height})"
