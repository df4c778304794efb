"""
API package.

``router`` aggregates the page routes and the supporting JSON routes;
``deps`` holds the FastAPI dependencies they share.
"""
