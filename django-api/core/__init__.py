"""Cross-app building blocks: domain error base, response envelope, permissions."""
