"""newsfeed — scrape a news site's listing pages, cache them, serve them."""

__version__ = "0.1.0"
