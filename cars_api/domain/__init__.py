"""Domain rules for car records."""
