"""Configuration and runtime setup."""
