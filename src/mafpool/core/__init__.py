"""Core models, the chat agent and the in-memory pool."""
