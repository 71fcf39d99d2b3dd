"""Command-line interface for orrery-ephemeris."""
