"""Configuration loading, path policy and derived settings."""
