"""Deck - an interactive TUI for splitting and joining files."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from pathlib import Path

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical
from textual.message import Message
from textual.widgets import (
    Button,
    DataTable,
    DirectoryTree,
    Footer,
    Header,
    Input,
    Label,
    Log,
    ProgressBar,
    Rule,
    Static,
)
from textual.worker import Worker

from partsplit.errors import PartSplitError
from partsplit.operations import FileJoiner, FileSplitter, check_practical_size, plan_parts
from partsplit.utils import format_size
from partsplit.utils.naming import DEFAULT_SUFFIX


@dataclass
class DeckStats:
    """Statistics tracked while a split or join runs."""

    operation: str = "--"
    status: str = "idle"
    parts_total: int = 0
    parts_done: int = 0
    bytes_done: int = 0
    current_file: str = ""
    start_time: datetime | None = None
    end_time: datetime | None = None

    @property
    def elapsed(self) -> str:
        if not self.start_time:
            return "00:00"
        end = self.end_time or datetime.now()
        minutes, seconds = divmod(int((end - self.start_time).total_seconds()), 60)
        return f"{minutes:02d}:{seconds:02d}"

    def copy(self) -> "DeckStats":
        return replace(self)


class StatsPanel(Static):
    """Status of the current operation."""

    def compose(self) -> ComposeResult:
        yield Static(id="stats-content")

    def on_mount(self) -> None:
        self.update_display(DeckStats())

    def update_display(self, stats: DeckStats) -> None:
        content = self.query_one("#stats-content", Static)
        status_color = {
            "idle": "dim",
            "running": "green",
            "complete": "cyan",
            "error": "red",
        }.get(stats.status, "white")
        current = Path(stats.current_file).name if stats.current_file else "--"

        content.update(f"""[b]STATUS[/b]  [{status_color}]{stats.status.upper()}[/]
[b]OP[/b]      {stats.operation}
[b]TIME[/b]    {stats.elapsed}

[b]PARTS[/b]
  Done   [green]{stats.parts_done:,}[/] / [cyan]{stats.parts_total:,}[/]
  Bytes  [cyan]{format_size(stats.bytes_done)}[/]
  Last   [dim]{current}[/]""")


class PartTable(DataTable):
    """Parts written or appended, in order."""

    def on_mount(self) -> None:
        self.add_columns("#", "File", "Size")
        self.cursor_type = "row"

    def add_part(self, index: int, path: str, size: int) -> None:
        display_name = Path(path).name
        if len(display_name) > 40:
            display_name = display_name[:37] + "..."
        self.add_row(str(index), display_name, format_size(size))
        self.scroll_end()


class PartDeck(App):
    """Split files into parts and join them back, interactively."""

    # Messages for thread-safe communication
    class StatsUpdated(Message):
        def __init__(self, stats: DeckStats) -> None:
            self.stats = stats
            super().__init__()

    class LogMessage(Message):
        def __init__(self, message: str) -> None:
            self.message = message
            super().__init__()

    class PartDone(Message):
        def __init__(self, index: int, path: str, size: int) -> None:
            self.index = index
            self.path = path
            self.size = size
            super().__init__()

    CSS = """
    #main-container {
        layout: horizontal;
        height: 100%;
    }

    #left-panel {
        width: 38;
        border-right: solid $primary-darken-2;
        padding: 1;
    }

    #center-panel {
        width: 1fr;
        padding: 1;
    }

    #right-panel {
        width: 32;
        border-left: solid $primary-darken-2;
        padding: 1;
    }

    StatsPanel {
        height: auto;
        padding: 1;
        border: round $primary;
        margin-bottom: 1;
    }

    #action-buttons {
        layout: horizontal;
        height: 3;
        margin-top: 1;
    }

    #action-buttons Button {
        margin-right: 1;
        min-width: 8;
    }

    PartTable {
        height: 1fr;
        border: round $primary-darken-1;
    }

    #progress-bar {
        width: 100%;
        margin-bottom: 1;
    }

    #log-panel {
        height: 10;
        border: round $primary-darken-2;
    }

    .section-title {
        text-style: bold;
        margin-bottom: 1;
    }

    DirectoryTree {
        height: 100%;
        border: round $primary-darken-1;
    }
    """

    BINDINGS = [
        Binding("s", "split", "Split", show=True),
        Binding("j", "join", "Join", show=True),
        Binding("c", "clear", "Clear", show=True),
        Binding("q", "quit", "Quit", show=True),
        Binding("d", "toggle_dark", "Toggle Dark Mode"),
    ]

    TITLE = "partsplit Deck"
    SUB_TITLE = "Split and join files"

    def __init__(self, workdir: Path | str | None = None):
        super().__init__()
        self.workdir = Path(workdir) if workdir is not None else Path.cwd()

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Container(id="main-container"):
            with Vertical(id="left-panel"):
                yield Label("CONTROLS", classes="section-title")
                yield StatsPanel()
                yield Label("File or folder")
                yield Input(placeholder="Pick from the browser or type a path...", id="source-input")
                yield Label("Part size (bytes)")
                yield Input(value="1048576", id="size-input", type="integer")
                yield Label("Suffix")
                yield Input(value=DEFAULT_SUFFIX, id="suffix-input")
                with Horizontal(id="action-buttons"):
                    yield Button("SPLIT", id="split-btn", variant="success")
                    yield Button("JOIN", id="join-btn", variant="primary")
                    yield Button("Clear", id="clear-btn", variant="warning")

            with Vertical(id="center-panel"):
                yield Label("PARTS", classes="section-title")
                yield ProgressBar(id="progress-bar", show_eta=False)
                yield PartTable(id="part-table")
                yield Rule()
                yield Label("LOG", classes="section-title")
                yield Log(id="log-panel", highlight=True, auto_scroll=True)

            with Vertical(id="right-panel"):
                yield Label("FILE BROWSER", classes="section-title")
                yield DirectoryTree(self.workdir, id="dir-tree")

        yield Footer()

    def on_mount(self) -> None:
        self._log("Deck ready")
        self._log("Pick a file to SPLIT or a folder to JOIN")

    def _log(self, message: str) -> None:
        timestamp = datetime.now().strftime("%H:%M:%S")
        self.query_one("#log-panel", Log).write_line(f"[{timestamp}] {message}")

    def _inputs(self) -> tuple[str, str, str]:
        source = self.query_one("#source-input", Input).value.strip()
        size = self.query_one("#size-input", Input).value.strip()
        suffix = self.query_one("#suffix-input", Input).value or DEFAULT_SUFFIX
        return source, size, suffix

    # Message handlers for thread-safe updates
    def on_part_deck_stats_updated(self, event: StatsUpdated) -> None:
        stats = event.stats
        self.query_one(StatsPanel).update_display(stats)
        self.query_one("#progress-bar", ProgressBar).update(
            total=max(stats.parts_total, 1), progress=stats.parts_done
        )

    def on_part_deck_log_message(self, event: LogMessage) -> None:
        self._log(event.message)

    def on_part_deck_part_done(self, event: PartDone) -> None:
        self.query_one("#part-table", PartTable).add_part(event.index, event.path, event.size)

    def on_directory_tree_file_selected(self, event: DirectoryTree.FileSelected) -> None:
        self.query_one("#source-input", Input).value = str(event.path)

    def on_directory_tree_directory_selected(
        self, event: DirectoryTree.DirectorySelected
    ) -> None:
        self.query_one("#source-input", Input).value = str(event.path)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "split-btn":
            self.action_split()
        elif event.button.id == "join-btn":
            self.action_join()
        elif event.button.id == "clear-btn":
            self.action_clear()

    def action_toggle_dark(self) -> None:
        self.theme = "textual-light" if self.theme == "textual-dark" else "textual-dark"

    def action_clear(self) -> None:
        self.query_one(StatsPanel).update_display(DeckStats())
        self.query_one("#part-table", PartTable).clear()
        self.query_one("#log-panel", Log).clear()
        self.query_one("#progress-bar", ProgressBar).update(total=None, progress=0)
        self._log("Cleared - ready for new run")

    def action_split(self) -> Worker | None:
        source, size, suffix = self._inputs()
        if not source:
            self._log("ERROR: No file specified")
            return None
        try:
            limit = int(size)
        except ValueError:
            self._log(f"ERROR: Part size must be a whole number, got {size!r}")
            return None
        self.query_one("#part-table", PartTable).clear()
        return self.run_split(source, limit, suffix)

    def action_join(self) -> Worker:
        source, _, suffix = self._inputs()
        self.query_one("#part-table", PartTable).clear()
        return self.run_join(source or str(self.workdir), suffix)

    def _fail(self, stats: DeckStats, error: Exception) -> None:
        stats.status = "error"
        stats.end_time = datetime.now()
        self.post_message(self.StatsUpdated(stats.copy()))
        self.post_message(self.LogMessage(f"ERROR: {error}"))

    @work(exclusive=True, thread=True)
    def run_split(self, source: str, limit: int, suffix: str) -> None:
        """Split a file in a background thread."""
        stats = DeckStats(operation="split", status="running", start_time=datetime.now())
        self.post_message(self.StatsUpdated(stats.copy()))
        self.post_message(self.LogMessage(f"Splitting {source} into {format_size(limit)} parts"))

        splitter = FileSplitter(suffix=suffix, workdir=self.workdir)
        try:
            check_practical_size(limit)
            source_file = splitter.read_source(source)
            stats.parts_total = len(plan_parts(source_file.size, limit))
            self.post_message(self.StatsUpdated(stats.copy()))

            for part in splitter.write_parts(source_file, limit):
                stats.parts_done += 1
                stats.bytes_done += part.size
                stats.current_file = str(part.path)
                self.post_message(self.StatsUpdated(stats.copy()))
                self.post_message(self.PartDone(part.index, str(part.path), part.size))
        except PartSplitError as e:
            self._fail(stats, e)
            return

        stats.status = "complete"
        stats.current_file = ""
        stats.end_time = datetime.now()
        self.post_message(self.StatsUpdated(stats.copy()))
        self.post_message(
            self.LogMessage(f"COMPLETE: {stats.parts_done} parts from {source}")
        )

    @work(exclusive=True, thread=True)
    def run_join(self, folder: str, suffix: str) -> None:
        """Join the parts in a folder in a background thread."""
        stats = DeckStats(operation="join", status="running", start_time=datetime.now())
        self.post_message(self.StatsUpdated(stats.copy()))

        joiner = FileJoiner(suffix=suffix)
        output = self.workdir / joiner.default_output(folder)
        self.post_message(self.LogMessage(f"Joining parts in {folder} -> {output}"))

        try:
            stats.parts_total = len(joiner.discover(folder, exclude=output))
            self.post_message(self.StatsUpdated(stats.copy()))

            for index, path in enumerate(joiner.iter_join(folder, output)):
                size = path.stat().st_size
                stats.parts_done += 1
                stats.bytes_done += size
                stats.current_file = str(path)
                self.post_message(self.StatsUpdated(stats.copy()))
                self.post_message(self.PartDone(index, str(path), size))
        except (PartSplitError, OSError) as e:
            self._fail(stats, e)
            return

        stats.status = "complete"
        stats.current_file = ""
        stats.end_time = datetime.now()
        self.post_message(self.StatsUpdated(stats.copy()))
        self.post_message(
            self.LogMessage(f"COMPLETE: {stats.parts_done} parts -> {output}")
        )


def main() -> None:
    """Run the Deck TUI."""
    app = PartDeck()
    app.run()


if __name__ == "__main__":
    main()
