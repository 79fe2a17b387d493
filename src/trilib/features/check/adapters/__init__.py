"""Adapters binding the check use cases to mutagen, SQLite, the local filesystem and the console."""
