"""Template loading, rendering and output."""
