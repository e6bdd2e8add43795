"""Core infrastructure: configuration, exceptions, middleware, lifecycle."""
