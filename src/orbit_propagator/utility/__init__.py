"""Runner utilities: logging, report printing, and time helpers."""
