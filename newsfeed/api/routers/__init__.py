"""Endpoint groups mounted by :func:`newsfeed.api.app.create_app`."""
