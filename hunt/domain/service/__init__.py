"""Domain services for Local Hunt."""

from .base import Service
from .comment_service import CommentService
from .product_service import ProductService
from .user_service import UserService
from .vote_service import VoteService

__all__ = [
    "Service",
    "UserService",
    "ProductService",
    "VoteService",
    "CommentService",
]
