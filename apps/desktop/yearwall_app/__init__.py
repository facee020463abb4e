"""YearWall command-line application."""
