"""Configuration layer: path discovery, persisted TOML config, derived settings."""
