"""contentops API domains."""
