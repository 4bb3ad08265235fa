"""HTTP API for Latchkey."""
