"""Configuration, authentication and password hashing."""
