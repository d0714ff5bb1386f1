"""Ambient stack shared by gateway services: settings, logging, middleware, HTTP client."""
