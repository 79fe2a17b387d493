"""trilib: keep a music library consistent across PC, database and DAP."""

__version__ = "0.1.0"
