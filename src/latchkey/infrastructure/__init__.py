"""Infrastructure layer for Latchkey."""
