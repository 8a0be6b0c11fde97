"""Dataset-backed lookups and the interactive console."""
