from app.models.post import Post  # Import all models here so mappers are registered

__all__ = ["Post"]
