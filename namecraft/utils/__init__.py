"""Utility packages for namecraft (logging, naming, filesystem, shared config)."""
