"""Tests for command routing and the command handlers."""

from pathlib import Path

import pytest

from playwise.context import AppContext
from playwise.router import handle_command


def run(ctx: AppContext, command: str, *args: str) -> AppContext:
    ctx, should_continue = handle_command(ctx, command, list(args))
    assert should_continue
    return ctx


def table_output(ctx: AppContext) -> str:
    return ctx.console.file.getvalue()


@pytest.fixture
def stocked_ctx(app_ctx: AppContext) -> AppContext:
    """Context with three tracks: Rain (Lo-Fi), Noise (Rock), Piano (Classical)."""
    run(app_ctx, "add", "Rain", "Nils", "Lo-Fi", "200")
    run(app_ctx, "add", "Noise", "Band", "Rock", "150")
    run(app_ctx, "add", "Piano", "Erik", "Classical", "300")
    return app_ctx


def _titles(ctx: AppContext) -> list[str]:
    return [track.title for track in ctx.session.tracks()]


class TestRouting:
    """Tests for dispatch basics."""

    @pytest.mark.parametrize("command", ["quit", "exit"])
    def test_quit_stops_loop(self, app_ctx: AppContext, command: str) -> None:
        _, should_continue = handle_command(app_ctx, command, [])
        assert should_continue is False

    def test_empty_command(self, app_ctx: AppContext) -> None:
        assert handle_command(app_ctx, "", []) == (app_ctx, True)

    def test_unknown_command(self, app_ctx: AppContext, capsys) -> None:
        run(app_ctx, "dance")
        assert "Unknown command" in capsys.readouterr().out

    def test_help(self, app_ctx: AppContext, capsys) -> None:
        run(app_ctx, "help")
        assert "playall" in capsys.readouterr().out


class TestCatalogCommands:
    """Tests for add, delete, move, reverse, list, search, sort."""

    def test_add_and_list(self, stocked_ctx: AppContext) -> None:
        run(stocked_ctx, "list")

        assert _titles(stocked_ctx) == ["Rain", "Noise", "Piano"]
        assert "Piano" in table_output(stocked_ctx)

    def test_add_autosaves(self, stocked_ctx: AppContext, data_file: Path) -> None:
        assert "Rain,Nils,Lo-Fi,200" in data_file.read_text(encoding="utf-8")

    def test_add_without_autosave(self, app_ctx: AppContext, data_file: Path) -> None:
        app_ctx.config.data.autosave = False
        run(app_ctx, "add", "Rain", "Nils", "Lo-Fi", "200")

        assert not data_file.exists()

    @pytest.mark.parametrize("duration", ["-5", "long"])
    def test_add_bad_duration(self, app_ctx: AppContext, duration: str, capsys) -> None:
        run(app_ctx, "add", "Rain", "Nils", "Lo-Fi", duration)

        assert len(app_ctx.session) == 0
        assert "Invalid duration" in capsys.readouterr().out

    def test_add_duplicate(self, stocked_ctx: AppContext, capsys) -> None:
        run(stocked_ctx, "add", "Rain", "Other", "Jazz", "10")

        assert len(stocked_ctx.session) == 3
        assert "already in the catalog" in capsys.readouterr().out

    def test_add_wrong_arity(self, app_ctx: AppContext, capsys) -> None:
        run(app_ctx, "add", "Rain")
        assert "Usage" in capsys.readouterr().out

    def test_delete_is_one_based(self, stocked_ctx: AppContext) -> None:
        run(stocked_ctx, "delete", "1")
        assert _titles(stocked_ctx) == ["Noise", "Piano"]

    @pytest.mark.parametrize("position", ["0", "4", "x"])
    def test_delete_invalid_position(self, stocked_ctx: AppContext, position: str) -> None:
        run(stocked_ctx, "delete", position)
        assert len(stocked_ctx.session) == 3

    def test_move(self, stocked_ctx: AppContext) -> None:
        run(stocked_ctx, "move", "1", "3")
        assert _titles(stocked_ctx) == ["Noise", "Piano", "Rain"]

    def test_move_out_of_range(self, stocked_ctx: AppContext, capsys) -> None:
        run(stocked_ctx, "move", "1", "9")

        assert _titles(stocked_ctx) == ["Rain", "Noise", "Piano"]
        assert "Positions must be" in capsys.readouterr().out

    def test_reverse(self, stocked_ctx: AppContext) -> None:
        run(stocked_ctx, "reverse")
        assert _titles(stocked_ctx) == ["Piano", "Noise", "Rain"]

    def test_list_and_search_show_ratings(self, stocked_ctx: AppContext) -> None:
        run(stocked_ctx, "rate", "Noise", "4")
        run(stocked_ctx, "list")
        listing = table_output(stocked_ctx)

        assert "Rating" in listing
        assert "4" in listing.split("Noise", 1)[1].splitlines()[0]

        run(stocked_ctx, "search", "Piano")
        found = table_output(stocked_ctx).split("Found at position 3", 1)[1]
        assert "Rating" in found

    def test_search(self, stocked_ctx: AppContext, capsys) -> None:
        run(stocked_ctx, "search", "Noise")
        assert "position 2" in table_output(stocked_ctx)

        run(stocked_ctx, "search", "Nothing")
        assert "No track titled" in capsys.readouterr().out

    def test_sort_is_view_only(self, stocked_ctx: AppContext) -> None:
        run(stocked_ctx, "sort", "duration")

        assert "Sorted by duration" in table_output(stocked_ctx)
        assert _titles(stocked_ctx) == ["Rain", "Noise", "Piano"]

    def test_sort_unknown_key(self, stocked_ctx: AppContext, capsys) -> None:
        run(stocked_ctx, "sort", "artist")
        assert "Unknown sort key" in capsys.readouterr().out

    def test_bracketed_title_printed_verbatim(self, app_ctx: AppContext) -> None:
        """Test titles are not interpreted as console markup."""
        run(app_ctx, "add", "[intro]", "Band", "Rock", "30")
        run(app_ctx, "list")

        assert "[intro]" in table_output(app_ctx)


class TestRatingCommands:
    """Tests for rate, unrate and ratings."""

    def test_rate_and_list(self, stocked_ctx: AppContext) -> None:
        run(stocked_ctx, "rate", "Rain", "5")
        run(stocked_ctx, "ratings", "5")

        assert stocked_ctx.session.tracks_with_rating(5)[0].title == "Rain"
        assert "Rain" in table_output(stocked_ctx)

    def test_rate_out_of_range(self, stocked_ctx: AppContext, capsys) -> None:
        run(stocked_ctx, "rate", "Rain", "7")

        assert stocked_ctx.session.rating_counts() == {1: 0, 2: 0, 3: 0, 4: 0, 5: 0}
        assert "between 1 and 5" in capsys.readouterr().out

    def test_rate_unknown_title(self, stocked_ctx: AppContext, capsys) -> None:
        run(stocked_ctx, "rate", "Missing", "3")
        assert "No track titled" in capsys.readouterr().out

    def test_unrate(self, stocked_ctx: AppContext) -> None:
        run(stocked_ctx, "rate", "Rain", "2")
        run(stocked_ctx, "unrate", "Rain")

        assert stocked_ctx.session.rating_counts()[2] == 0


class TestPlaybackCommands:
    """Tests for play, playall, next, prev, current and undo."""

    def test_play_single(self, stocked_ctx: AppContext) -> None:
        ctx = run(stocked_ctx, "play", "Noise")

        assert ctx.session.play_count("Noise") == 1
        assert ctx.player_state.current_index == 1

    def test_playall_then_auto_replay(self, stocked_ctx: AppContext, capsys) -> None:
        """Test every track plays once, then calming tracks replay."""
        run(stocked_ctx, "playall")
        session = stocked_ctx.session

        assert session.play_count("Rain") == 2
        assert session.play_count("Piano") == 2
        assert session.play_count("Noise") == 1
        assert "Auto-replaying 2 calming tracks" in capsys.readouterr().out

    def test_playall_without_auto_replay(self, stocked_ctx: AppContext) -> None:
        stocked_ctx.config.autoreplay.enabled = False
        run(stocked_ctx, "playall")

        assert stocked_ctx.session.play_count("Rain") == 1

    def test_next_walks_catalog_then_replays(self, stocked_ctx: AppContext) -> None:
        ctx = stocked_ctx
        for _ in range(3):
            ctx = run(ctx, "next")
        assert ctx.player_state.current_index == 2

        ctx = run(ctx, "next")

        assert not ctx.player_state.is_playing
        assert ctx.session.play_count("Rain") == 2
        assert ctx.session.play_count("Noise") == 1

    def test_prev(self, stocked_ctx: AppContext, capsys) -> None:
        ctx = run(stocked_ctx, "next")
        ctx = run(ctx, "prev")
        assert "Already at the start" in capsys.readouterr().out

        ctx = run(ctx, "next")
        ctx = run(ctx, "prev")
        assert ctx.player_state.current_index == 0

    def test_current(self, stocked_ctx: AppContext, capsys) -> None:
        ctx = run(stocked_ctx, "current")
        assert "Nothing is playing" in capsys.readouterr().out

        ctx = run(ctx, "next")
        run(ctx, "current")
        assert "Now playing: Rain by Nils" in capsys.readouterr().out

    def test_undo(self, stocked_ctx: AppContext) -> None:
        run(stocked_ctx, "play", "Rain")
        run(stocked_ctx, "play", "Noise")
        run(stocked_ctx, "undo")

        assert [t.title for t in stocked_ctx.session.recently_played()] == ["Rain"]
        assert stocked_ctx.session.play_count("Noise") == 1


class TestTrackingCommands:
    """Tests for skip, skipped, clearskips, recent and clearrecent."""

    def test_skip_excludes_from_auto_replay(self, stocked_ctx: AppContext) -> None:
        run(stocked_ctx, "skip", "Rain")
        run(stocked_ctx, "playall")

        assert stocked_ctx.session.play_count("Rain") == 1
        assert stocked_ctx.session.play_count("Piano") == 2

    def test_skipped_and_clear(self, stocked_ctx: AppContext) -> None:
        run(stocked_ctx, "skip", "Noise")
        run(stocked_ctx, "skipped")
        assert "Noise" in table_output(stocked_ctx)

        run(stocked_ctx, "clearskips")
        assert stocked_ctx.session.skipped.window() == []

    def test_recent_with_genre_breakdown(self, stocked_ctx: AppContext) -> None:
        run(stocked_ctx, "recent")
        output = table_output(stocked_ctx)

        assert "By genre" in output
        assert "Classical" in output

    def test_recent_by_genre(self, stocked_ctx: AppContext) -> None:
        run(stocked_ctx, "recent", "rock")
        assert "Noise" in table_output(stocked_ctx)

    def test_recent_by_bracketed_genre(self, app_ctx: AppContext) -> None:
        """Test a genre that looks like console markup is shown as typed."""
        run(app_ctx, "add", "Rain", "Nils", "[/]", "200")
        run(app_ctx, "recent", "[/]")

        assert "Recently added [/]" in table_output(app_ctx)

    def test_clearrecent(self, stocked_ctx: AppContext) -> None:
        run(stocked_ctx, "clearrecent")
        assert stocked_ctx.session.recently_added.window() == []


class TestAdminCommands:
    """Tests for snapshot, save and status."""

    def test_snapshot(self, stocked_ctx: AppContext) -> None:
        run(stocked_ctx, "rate", "Piano", "4")
        run(stocked_ctx, "play", "Piano")
        run(stocked_ctx, "snapshot")
        output = table_output(stocked_ctx)

        assert "Longest tracks" in output
        assert "Recently played" in output
        assert "Tracks by rating" in output
        assert "Play counts" in output

    def test_save(self, stocked_ctx: AppContext, data_file: Path, capsys) -> None:
        data_file.unlink()
        run(stocked_ctx, "save")

        assert data_file.exists()
        assert "Saved 3 tracks" in capsys.readouterr().out

    def test_save_disabled(self, stocked_ctx: AppContext, capsys) -> None:
        stocked_ctx.session.data_file = None
        run(stocked_ctx, "save")

        assert "disabled" in capsys.readouterr().out

    def test_status(self, stocked_ctx: AppContext, capsys) -> None:
        run(stocked_ctx, "status")
        assert "Tracks: 3" in capsys.readouterr().out
