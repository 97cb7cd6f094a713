"""PrepTrack dashboard backend."""
