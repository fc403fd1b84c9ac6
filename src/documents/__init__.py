"""Document analysis payloads and per-document requisite checks."""
