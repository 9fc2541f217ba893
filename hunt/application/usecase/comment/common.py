"""Comment response shared by the comment use cases."""

from datetime import datetime

from pydantic import BaseModel

from hunt.domain.model import Comment


class CommentResponse(BaseModel):
    """Comment as returned to RPC callers."""

    id: str
    content: str
    author_id: str
    product_id: str
    created_at: datetime

    @classmethod
    def from_domain(cls, comment: Comment) -> "CommentResponse":
        return cls(
            id=str(comment.id),
            content=comment.content,
            author_id=str(comment.author_id),
            product_id=str(comment.product_id),
            created_at=comment.created_at,
        )
