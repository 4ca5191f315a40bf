"""Vote use cases."""

from .submit_vote import (
    VOTE_ACTION,
    SubmitVoteRequest,
    SubmitVoteResponse,
    SubmitVoteUseCase,
)

__all__ = [
    "VOTE_ACTION",
    "SubmitVoteRequest",
    "SubmitVoteResponse",
    "SubmitVoteUseCase",
]
