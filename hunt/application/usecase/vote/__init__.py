"""Vote use cases."""

from .create_vote import CreateVoteRequest, CreateVoteUseCase, VoteResponse
from .delete_vote import DeleteVoteRequest, DeleteVoteResponse, DeleteVoteUseCase

__all__ = [
    "CreateVoteRequest",
    "CreateVoteUseCase",
    "VoteResponse",
    "DeleteVoteRequest",
    "DeleteVoteResponse",
    "DeleteVoteUseCase",
]
