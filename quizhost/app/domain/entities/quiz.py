from pydantic import BaseModel, Field
from uuid import UUID
from quizhost.app.domain.identifiers import QUIZ_CODE_MIN, QUIZ_CODE_MAX


"""
Quiz Entity:
1. id (UUID): Unique identifier for the quiz. Generated once on creation, never changes.
2. quiz_code (int): 4-digit code participants use to find the quiz. Not guaranteed to be unique.
3. date (str): Date of the quiz as entered by the host. Stored as free-form text.
"""
class Quiz(BaseModel):
    id: UUID
    quiz_code: int = Field(ge=QUIZ_CODE_MIN, le=QUIZ_CODE_MAX)
    date: str

    @classmethod
    def from_row(cls, row: tuple) -> "Quiz":
        return cls(id=row[0], quiz_code=row[1], date=row[2])
