"""A small asynchronous HTTP server with request parsing, service routing and a demo command."""

__version__ = "0.1.0"