"""Tests for the playback history stack."""

from playwise.domain.history.playback import PlaybackHistory


class TestPlaybackHistory:
    """Tests for push, undo and recent views."""

    def test_undo_pops_most_recent(self, registry, make_track) -> None:
        history = PlaybackHistory(registry)
        a, b = make_track("A"), make_track("B")
        history.add(a)
        history.add(b)

        assert history.undo_last_play() == b
        assert history.undo_last_play() == a
        assert history.undo_last_play() is None

    def test_recently_played_newest_first(self, registry, make_track) -> None:
        history = PlaybackHistory(registry)
        tracks = [make_track(title) for title in ["A", "B", "C"]]
        for track in tracks:
            history.add(track)
        history.add(tracks[0])

        assert [t.title for t in history.recently_played(3)] == ["A", "C", "B"]
        assert history.recently_played(0) == []

    def test_entries_oldest_first_with_limit(self, registry, make_track) -> None:
        """Test entries keeps the newest plays when limited."""
        history = PlaybackHistory(registry)
        for title in ["A", "B", "C", "D"]:
            history.add(make_track(title))

        assert [t.title for t in history.entries()] == ["A", "B", "C", "D"]
        assert [t.title for t in history.entries(2)] == ["C", "D"]
        assert history.entries(0) == []

    def test_purge_removes_every_occurrence(self, registry, make_track) -> None:
        history = PlaybackHistory(registry)
        a, b = make_track("A"), make_track("B")
        for track in (a, b, a):
            history.add(track)

        assert history.purge(a) == 2
        assert history.entries() == [b]
        assert len(history) == 1

    def test_undo_skips_released_tracks(self, registry, make_track) -> None:
        """Test undo never hands back a removed track."""
        history = PlaybackHistory(registry)
        a, b = make_track("A"), make_track("B")
        history.add(a)
        history.add(b)
        registry.release(b.id)

        assert history.undo_last_play() == a
        assert len(history) == 0
