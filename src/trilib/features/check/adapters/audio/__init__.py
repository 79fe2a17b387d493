"""Mutagen-backed tag codec."""

from .codec import SUPPORTED_AUDIO_EXTENSIONS, MutagenTagCodec

__all__ = ["MutagenTagCodec", "SUPPORTED_AUDIO_EXTENSIONS"]
