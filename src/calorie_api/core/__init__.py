"""Core configuration, security and errors."""
