"""Command-line entry-point package (``newsfeed`` console script)."""
