"""Data access objects over the trilib schema."""

from .artwork_dao import ArtworkDAO, ArtworkRow
from .track_dao import METADATA_COLUMNS, TrackDAO, TrackRow

__all__ = ["ArtworkDAO", "ArtworkRow", "METADATA_COLUMNS", "TrackDAO", "TrackRow"]
