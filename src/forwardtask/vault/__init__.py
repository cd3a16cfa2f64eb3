"""Vault access: daily notes, note storage, and file-backed editing."""
