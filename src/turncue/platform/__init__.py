"""Platform services: logging, display scale detection, keyed archives."""
