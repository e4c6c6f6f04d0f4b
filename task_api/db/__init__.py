"""Database Base — declarative base shared by every ORM model."""
