"""Configuration, logging, tokens and auth dependencies."""
