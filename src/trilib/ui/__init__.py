"""User interface layer."""
