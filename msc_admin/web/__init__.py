"""Server-rendered admin pages."""
