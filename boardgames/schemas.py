from typing import Annotated, Optional

from fastapi import Path
from pydantic import BaseModel, Field, field_validator

from boardgames.errors import ValidationError


VOTE_MESSAGE = 'No valid vote change was included on the request body'
STRINGS_MESSAGE = 'Values should only be strings'

# ids and vote counts are 32-bit integer columns
MAX_INTEGER_COLUMN = 2 ** 31 - 1

RecordId = Annotated[int, Path(le=MAX_INTEGER_COLUMN)]


def ensure_string(value):
    if value is not None and not isinstance(value, str):
        raise ValueError(STRINGS_MESSAGE)
    return value


class VoteUpdateSchema(BaseModel):
    inc_votes: Optional[int] = Field(None, validate_default=True)

    @field_validator('inc_votes', mode='before')
    def validate_inc_votes(cls, inc_votes):
        if isinstance(inc_votes, bool) or not isinstance(inc_votes, (int, str)):
            raise ValueError(VOTE_MESSAGE)
        try:
            inc_votes = int(inc_votes)
        except ValueError:
            raise ValueError(VOTE_MESSAGE) from None
        if abs(inc_votes) > MAX_INTEGER_COLUMN:
            raise ValueError(VOTE_MESSAGE)
        return inc_votes


def vote_change(vote: Optional[VoteUpdateSchema]) -> int:
    if vote is None:
        raise ValidationError(VOTE_MESSAGE)
    return vote.inc_votes
