"""Infrastructure shared across features: logging, SQLite and filesystem helpers."""
