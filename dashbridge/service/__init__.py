"""FastAPI service exposing the providers, comparator and config inspection."""
