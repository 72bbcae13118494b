"""Library domain - tracks, the ordered catalog and its indices.

This domain handles:
- Track data model and the registry that owns tracks
- The ordered, handle-linked catalog
- Title lookup
- Sorting and snapshot assembly for display
"""

# Models
from .models import UNKNOWN_GENRE, Track, format_duration, get_display_name

# Ownership and ordering
from .registry import TrackRegistry
from .catalog import OrderedCatalog
from .index import TitleIndex
from .ordering import SORT_KEYS, longest_tracks, sort_tracks
from .snapshot import CatalogSnapshot, build_snapshot

__all__ = [
    # Models
    "UNKNOWN_GENRE",
    "Track",
    "format_duration",
    "get_display_name",
    # Structures
    "TrackRegistry",
    "OrderedCatalog",
    "TitleIndex",
    # Ordering
    "SORT_KEYS",
    "longest_tracks",
    "sort_tracks",
    # Snapshot
    "CatalogSnapshot",
    "build_snapshot",
]
