"""Tests for sorting helpers and snapshot assembly."""

import pytest

from playwise.domain.library.ordering import longest_tracks, sort_tracks
from playwise.domain.library.snapshot import build_snapshot


@pytest.fixture
def tracks(make_track):
    return [
        make_track("Charlie", duration=200),
        make_track("Alpha", duration=100),
        make_track("Bravo", duration=200),
        make_track("Delta", duration=50),
    ]


class TestSortTracks:
    """Tests for sort_tracks."""

    def test_sort_by_title(self, tracks) -> None:
        """Test ascending title order."""
        assert [t.title for t in sort_tracks(tracks, "title")] == ["Alpha", "Bravo", "Charlie", "Delta"]

    def test_sort_by_duration_is_stable(self, tracks) -> None:
        """Test equal durations keep their input order."""
        result = sort_tracks(tracks, "duration")

        assert [t.title for t in result] == ["Delta", "Alpha", "Charlie", "Bravo"]

    def test_sort_does_not_mutate_input(self, tracks) -> None:
        """Test the input list is untouched."""
        before = list(tracks)
        sort_tracks(tracks, "title")

        assert tracks == before

    def test_unknown_key_raises(self, tracks) -> None:
        """Test an invalid key is rejected."""
        with pytest.raises(ValueError):
            sort_tracks(tracks, "artist")


class TestLongestTracks:
    """Tests for longest_tracks."""

    def test_longest_first_with_stable_ties(self, tracks) -> None:
        assert [t.title for t in longest_tracks(tracks, 3)] == ["Charlie", "Bravo", "Alpha"]

    def test_limit_zero(self, tracks) -> None:
        assert longest_tracks(tracks, 0) == []


class TestBuildSnapshot:
    """Tests for build_snapshot."""

    def test_snapshot_contents(self, tracks) -> None:
        """Test totals, longest tracks and play-count ordering."""
        snapshot = build_snapshot(
            tracks,
            recently_played=[tracks[1]],
            rating_counts={5: 1, 1: 0, 2: 0, 3: 0, 4: 0},
            play_counts={"Bravo": 2, "Alpha": 2, "Delta": 5},
        )

        assert snapshot.total_tracks == 4
        assert snapshot.total_duration == 550
        assert [t.title for t in snapshot.longest] == ["Charlie", "Bravo", "Alpha", "Delta"]
        assert snapshot.recently_played == [tracks[1]]
        assert list(snapshot.rating_counts) == [1, 2, 3, 4, 5]
        assert snapshot.play_counts == [("Delta", 5), ("Alpha", 2), ("Bravo", 2)]

    def test_empty_snapshot(self) -> None:
        snapshot = build_snapshot([], [], {}, {})

        assert snapshot.total_tracks == 0
        assert snapshot.longest == []
        assert snapshot.play_counts == []
