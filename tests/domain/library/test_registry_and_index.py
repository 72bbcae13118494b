"""Tests for the track registry and title index."""

import pytest

from playwise.domain.library.index import TitleIndex
from playwise.domain.library.models import UNKNOWN_GENRE, format_duration, get_display_name
from playwise.domain.library.registry import TrackRegistry


class TestTrackRegistry:
    """Tests for handle allocation and ownership."""

    def test_handles_increase_and_are_not_reused(self, registry: TrackRegistry) -> None:
        """Test a released handle is never handed out again."""
        first = registry.create("One", "Artist")
        second = registry.create("Two", "Artist")
        registry.release(first.id)
        third = registry.create("Three", "Artist")

        assert first.id < second.id < third.id
        assert registry.get(first.id) is None

    def test_release_returns_track_once(self, registry: TrackRegistry) -> None:
        """Test releasing twice is harmless."""
        track = registry.create("Gone", "Artist")

        assert registry.release(track.id) == track
        assert registry.release(track.id) is None
        assert not registry.is_live(track.id)

    def test_blank_genre_becomes_unknown(self, registry: TrackRegistry) -> None:
        """Test genre defaults to Unknown."""
        track = registry.create("Untagged", "Artist", "", 10)

        assert track.genre == UNKNOWN_GENRE

    def test_negative_duration_rejected(self, registry: TrackRegistry) -> None:
        """Test durations must be non-negative."""
        with pytest.raises(ValueError):
            registry.create("Bad", "Artist", "Pop", -1)

    def test_contains_and_iter(self, registry: TrackRegistry) -> None:
        """Test membership and iteration over live tracks."""
        kept = registry.create("Kept", "Artist")
        dropped = registry.create("Dropped", "Artist")
        registry.release(dropped.id)

        assert kept in registry
        assert dropped not in registry
        assert list(registry) == [kept]
        assert len(registry) == 1


class TestTitleIndex:
    """Tests for title lookup."""

    def test_lookup_registered_title(self, registry: TrackRegistry) -> None:
        """Test exact-title lookup."""
        index = TitleIndex(registry)
        track = registry.create("Rainy Day", "Artist")
        index.register(track)

        assert index.lookup("Rainy Day") == track
        assert "Rainy Day" in index

    def test_lookup_is_exact(self, registry: TrackRegistry) -> None:
        """Test lookup is case-sensitive and never raises on a miss."""
        index = TitleIndex(registry)
        index.register(registry.create("Rainy Day", "Artist"))

        assert index.lookup("rainy day") is None
        assert index.lookup("Missing") is None

    def test_released_track_reads_as_miss(self, registry: TrackRegistry) -> None:
        """Test a stale entry cannot resolve to a removed track."""
        index = TitleIndex(registry)
        track = registry.create("Stale", "Artist")
        index.register(track)
        registry.release(track.id)

        assert index.lookup("Stale") is None
        assert "Stale" not in index

    def test_unregister_only_matching_handle(self, registry: TrackRegistry) -> None:
        """Test unregistering an old track keeps a newer mapping for the title."""
        index = TitleIndex(registry)
        old = registry.create("Same", "Artist")
        new = registry.create("Same", "Other")
        index.register(old)
        index.register(new)

        assert index.unregister(old) is False
        assert index.lookup("Same") == new
        assert index.unregister(new) is True
        assert len(index) == 0


class TestModelHelpers:
    """Tests for display helpers."""

    def test_display_name(self, registry: TrackRegistry) -> None:
        track = registry.create("Rain", "Nils")
        assert get_display_name(track) == "Rain by Nils"

    @pytest.mark.parametrize(
        "seconds,expected",
        [(0, "0:00"), (59, "0:59"), (200, "3:20"), (3661, "1:01:01")],
    )
    def test_format_duration(self, seconds: int, expected: str) -> None:
        assert format_duration(seconds) == expected
