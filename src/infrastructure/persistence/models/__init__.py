from src.infrastructure.persistence.models.author import AuthorModel
# Mixins for model composition
from src.infrastructure.persistence.models.mixins import TimestampMixin
from src.infrastructure.persistence.models.post import PostModel

__all__ = [
    # Models
    "AuthorModel",
    "PostModel",
    # Mixins
    "TimestampMixin",
]
