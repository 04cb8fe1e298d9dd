"""Report renderers: HTML, JSON, and terminal."""
