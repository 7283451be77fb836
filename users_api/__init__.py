"""Users CRUD service."""
