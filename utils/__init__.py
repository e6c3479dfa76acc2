"""Transport, authentication, logging and configuration helpers."""
