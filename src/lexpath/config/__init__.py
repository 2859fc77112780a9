"""Configuration package: file locations, persisted config and derived settings."""
