"""Configuration for logging and the compiler."""
