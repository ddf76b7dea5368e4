from feedrank.domain.entities.author import AuthorProfile
from feedrank.domain.entities.category import ALL_CATEGORIES, Category, normalize_category
from feedrank.domain.entities.post import Post, PostImage, ScoredPost

__all__ = [
    "Post",
    "PostImage",
    "ScoredPost",
    "AuthorProfile",
    "Category",
    "ALL_CATEGORIES",
    "normalize_category",
]
