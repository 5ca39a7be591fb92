"""Command-line interface for skillsweep."""
