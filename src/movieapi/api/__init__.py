"""HTTP layer for the movie catalog."""
