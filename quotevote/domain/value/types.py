"""Domain value objects for Quote.Vote."""

from enum import Enum


class VoteType(str, Enum):
    """Direction of a vote on a post."""

    UP = "up"
    DOWN = "down"
