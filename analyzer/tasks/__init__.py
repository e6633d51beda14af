"""Analysis task runners."""
