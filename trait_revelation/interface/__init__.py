"""Developer interface for the revelation engine."""
