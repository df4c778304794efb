"""Configuration, logging, errors and storage for the guestbook."""
