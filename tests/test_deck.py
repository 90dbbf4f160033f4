"""Headless tests for the Deck TUI."""

import asyncio

from partsplit.deck import DeckStats, PartDeck, PartTable
from partsplit.operations import FileJoiner


def run_deck(workdir, setup, action):
    """Fill the Deck inputs with `setup(app)`, run `action` and wait for it.

    Only the worker started by the action is awaited; the directory tree
    keeps its own loader worker running for the life of the app.

    Returns (part table row count, log lines) once the action is done.
    """

    async def _run():
        app = PartDeck(workdir=workdir)
        async with app.run_test() as pilot:
            setup(app)
            worker = getattr(app, action)()
            if worker is not None:
                await worker.wait()
            await pilot.pause()
            await pilot.pause()
            rows = app.query_one("#part-table", PartTable).row_count
            lines = list(app.query_one("#log-panel").lines)
            return rows, lines

    return asyncio.run(_run())


def test_stats_elapsed_idle():
    assert DeckStats().elapsed == "00:00"
    assert DeckStats().copy() == DeckStats()


def test_deck_splits_file(tmp_path, make_source):
    source = make_source(3500, "clip.mp4")
    work = tmp_path / "deck"
    work.mkdir()

    def setup(app):
        app.query_one("#source-input").value = str(source)
        app.query_one("#size-input").value = "1000"

    rows, _ = run_deck(work, setup, "action_split")

    assert sorted(p.name for p in work.iterdir()) == [
        "clip_part0",
        "clip_part1",
        "clip_part2",
        "clip_part3",
    ]
    assert rows == 4


def test_deck_joins_folder(tmp_path):
    work = tmp_path / "deck"
    parts = tmp_path / "parts"
    work.mkdir()
    parts.mkdir()
    (parts / "f_part0").write_bytes(b"he")
    (parts / "f_part1").write_bytes(b"llo")

    def setup(app):
        app.query_one("#source-input").value = str(parts)

    rows, _ = run_deck(work, setup, "action_join")

    assert (work / "parts - unsplit").read_bytes() == b"hello"
    assert rows == 2


def test_deck_rejects_small_size(tmp_path, make_source):
    source = make_source(3500)
    work = tmp_path / "deck"
    work.mkdir()

    def setup(app):
        app.query_one("#source-input").value = str(source)
        app.query_one("#size-input").value = "10"

    _, lines = run_deck(work, setup, "action_split")

    assert list(work.iterdir()) == []
    assert any("impractical" in line for line in lines)


def test_deck_logs_part_vanishing_mid_join(tmp_path, monkeypatch):
    work = tmp_path / "deck"
    parts = tmp_path / "parts"
    work.mkdir()
    parts.mkdir()
    (parts / "f_part0").write_bytes(b"he")

    def iter_join(self, folder=None, output=None):
        yield parts / "f_part9"

    monkeypatch.setattr(FileJoiner, "iter_join", iter_join)

    def setup(app):
        app.query_one("#source-input").value = str(parts)

    rows, lines = run_deck(work, setup, "action_join")

    assert rows == 0
    assert any("ERROR" in line and "f_part9" in line for line in lines)
