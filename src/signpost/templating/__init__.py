"""Template rendering through kida."""
