"""Typer CLI application."""

import json
import threading
from pathlib import Path
from typing import Annotated, Any, Optional

import typer
from rich.console import Console
from rich.tree import Tree

from ansi_frame import __version__
from ansi_frame.config import FrameConfig
from ansi_frame.describe import load_layout
from ansi_frame.layout.types import Constraints
from ansi_frame.log import configure_logging
from ansi_frame.reactive.signal import Signal
from ansi_frame.render.app import App
from ansi_frame.render.tree import RenderTree, build_render_tree
from ansi_frame.terminal import Terminal
from ansi_frame.widgets import (
    BorderStyle,
    BuildContext,
    Column,
    Component,
    Dock,
    Label,
    Row,
    Spacer,
    Style,
    Widget,
    cells,
    flex,
    percent,
)


def _label(node: RenderTree) -> str:
    r = node.rect
    name = type(node.widget).__name__
    return f"[bold]{name}[/] [dim]{node.path}[/] [cyan]({r.x},{r.y})[/] [green]{r.width}x{r.height}[/]"


def to_rich_tree(tree: RenderTree, root: Optional[Tree] = None) -> Tree:
    """Render-tree rects as a rich Tree."""
    branch = Tree(_label(tree)) if root is None else root.add(_label(tree))
    for child in tree.children:
        to_rich_tree(child, branch)
    return branch


def to_dict(tree: RenderTree) -> dict[str, Any]:
    r = tree.rect
    return {
        "widget": type(tree.widget).__name__,
        "path": tree.path,
        "rect": {"x": r.x, "y": r.y, "width": r.width, "height": r.height},
        "children": [to_dict(child) for child in tree.children],
    }


class DemoDashboard(Component):
    """Header, sidebar, body and a status line showing a live counter."""

    def __init__(self, ticks: Signal[int]) -> None:
        super().__init__()
        self.ticks = ticks

    def build(self, ctx: BuildContext) -> Widget:
        count = self.ticks.get() or 0
        return Dock(
            top=[Label("ansi-frame demo", height=cells(1))],
            bottom=[Label(f"tick {count}", height=cells(1))],
            left=[Column(
                [Label("menu"), Spacer(), Label("quit")],
                width=percent(25),
                style=Style(border=BorderStyle.ROUNDED),
            )],
            body=Row(
                [Label("a", width=flex(1)), Label("b", width=flex(2))],
                spacing=1,
            ),
        )


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="ansi-frame",
        help="Resolve and inspect declarative terminal layouts.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()

    def show_version(value: bool) -> None:
        if value:
            console.print(f"ansi-frame {__version__}")
            raise typer.Exit()

    @app.callback()
    def main_callback(
        version: Annotated[
            bool,
            typer.Option("--version", "-V", help="Show version and exit", callback=show_version, is_eager=True),
        ] = False,
    ) -> None:
        """Declarative terminal UI layout toolkit."""
        configure_logging(FrameConfig.from_env())

    @app.command()
    def layout(
        path: Annotated[Path, typer.Argument(help="JSON layout description")],
        width: Annotated[Optional[int], typer.Option("--width", "-w", help="Viewport width (default: terminal)")] = None,
        height: Annotated[Optional[int], typer.Option("--height", "-H", help="Viewport height (default: terminal)")] = None,
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """Resolve a layout description and print the computed rectangles."""
        if not path.exists():
            console.print(f"[red]No such file: {path}[/]")
            raise typer.Exit(1)
        try:
            root = load_layout(path)
        except ValueError as e:
            console.print(f"[red]Invalid layout: {e}[/]")
            raise typer.Exit(1)

        size = Terminal.size()
        constraints = Constraints.tight(width or size.cols, height or size.rows)
        tree = build_render_tree(root, constraints)

        if json_output:
            print(json.dumps(to_dict(tree), indent=2))
        else:
            console.print(to_rich_tree(tree))

    @app.command()
    def demo(
        frames: Annotated[int, typer.Option("--frames", "-n", help="Frames to render")] = 3,
        width: Annotated[Optional[int], typer.Option("--width", "-w", help="Viewport width (default: terminal)")] = None,
        height: Annotated[Optional[int], typer.Option("--height", "-H", help="Viewport height (default: terminal)")] = None,
        interval: Annotated[float, typer.Option("--interval", "-i", help="Seconds between counter updates")] = 0.05,
    ) -> None:
        """Run the frame loop on a small dashboard driven by a background timer."""
        size = Terminal.size()
        ticks = Signal(0)
        done = threading.Event()

        def paint(tree: RenderTree) -> None:
            console.rule(f"frame {app_.frames}")
            console.print(to_rich_tree(tree))

        def tick() -> None:
            while not done.wait(interval):
                ticks.update(lambda n: (n or 0) + 1)

        with App(
            DemoDashboard(ticks),
            size=(width or size.cols, height or size.rows),
            paint=paint,
        ) as app_:
            worker = threading.Thread(target=tick, daemon=True)
            worker.start()
            try:
                rendered = app_.run(max_frames=max(0, frames))
            finally:
                done.set()
                worker.join()
        console.print(f"[green]Rendered {rendered} frame(s)[/]")

    return app


def main() -> None:
    """Main CLI entry point."""
    create_app()()


if __name__ == "__main__":
    main()
