"""Headless tests for the reader TUI."""

import asyncio

import pytest

from orenkniga.config import AppConfig
from orenkniga.storage import MemoryStore
from orenkniga.tui.app import ReaderApp
from orenkniga.tui.screens import CatalogScreen, ReaderScreen, SettingsScreen
from orenkniga.tui.state import ReaderState
from orenkniga.tui.widgets import BookNotFoundDialog

SETTLE = 1.0


@pytest.fixture
def tui_state(tmp_path):
    config = AppConfig(data_dir=tmp_path, settle_interval=SETTLE)
    return ReaderState(config=config, store=MemoryStore())


def run(app: ReaderApp, scenario) -> None:
    async def _main():
        async with app.run_test() as pilot:
            await pilot.pause()
            await scenario(pilot)

    asyncio.run(_main())


def test_starts_on_catalog(tui_state):
    app = ReaderApp(tui_state)

    async def scenario(pilot):
        assert isinstance(app.screen, CatalogScreen)
        assert len(app.screen.books) == 2

    run(app, scenario)


def test_flip_is_debounced(tui_state):
    app = ReaderApp(tui_state, book_id="1")

    async def scenario(pilot):
        screen = app.screen
        assert isinstance(screen, ReaderScreen)
        assert screen.session.current_page == 1

        await pilot.press("right")
        assert screen.session.current_page == 2

        await pilot.press("left")
        assert screen.session.current_page == 2

        await pilot.pause(SETTLE + 0.3)
        await pilot.press("left")
        assert screen.session.current_page == 1

    run(app, scenario)


def test_bookmark_key(tui_state):
    app = ReaderApp(tui_state, book_id="2")

    async def scenario(pilot):
        await pilot.press("b")
        bookmarks = tui_state.bookmarks.list_bookmarks("2")
        assert [b.page for b in bookmarks] == [1]

    run(app, scenario)


def test_settings_panel_adjusts_font_size(tui_state):
    app = ReaderApp(tui_state, book_id="1")

    async def scenario(pilot):
        await pilot.press("s")
        assert isinstance(app.screen, SettingsScreen)

        await pilot.press("right")
        await pilot.press("escape")

        assert isinstance(app.screen, ReaderScreen)
        assert tui_state.settings.load().font_size == 19

    run(app, scenario)


def test_theme_key_cycles_theme(tui_state):
    app = ReaderApp(tui_state, book_id="1")

    async def scenario(pilot):
        await pilot.press("t")
        assert tui_state.settings.load().theme.value == "dark"

    run(app, scenario)


def test_unknown_book_offers_catalog(tui_state):
    app = ReaderApp(tui_state, book_id="missing")

    async def scenario(pilot):
        assert isinstance(app.screen, BookNotFoundDialog)
        await pilot.press("c")
        await pilot.pause()
        assert isinstance(app.screen, CatalogScreen)

    run(app, scenario)


def test_unknown_book_escape_returns_to_catalog(tui_state):
    app = ReaderApp(tui_state, book_id="missing")

    async def scenario(pilot):
        await pilot.press("escape")
        await pilot.pause()
        assert isinstance(app.screen, CatalogScreen)

    run(app, scenario)


def test_unknown_book_quit_exits_with_error(tui_state):
    app = ReaderApp(tui_state, book_id="missing")

    async def scenario(pilot):
        await pilot.press("q")

    run(app, scenario)
    assert app.return_code == 1


def test_escape_returns_to_catalog_and_closes_session(tui_state):
    app = ReaderApp(tui_state, book_id="1")

    async def scenario(pilot):
        reader_screen = app.screen
        await pilot.press("right")
        await pilot.press("escape")
        await pilot.pause()

        assert isinstance(app.screen, CatalogScreen)
        assert reader_screen.session.closed

    run(app, scenario)
