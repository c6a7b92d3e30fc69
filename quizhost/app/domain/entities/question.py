from pydantic import BaseModel
from uuid import UUID


"""
Question Entity:
1. id (UUID): Unique identifier for the question.
2. quiz_id (UUID): Identifier of the quiz this question belongs to.
3. question (str): The text of the question.
4. answer (str): The expected answer.
5. section (int): Grouping tag inside the quiz. Defaults to 1.
"""
class Question(BaseModel):
    id: UUID
    quiz_id: UUID
    question: str
    answer: str
    section: int = 1

    @classmethod
    def from_row(cls, row: tuple) -> "Question":
        return cls(id=row[0], quiz_id=row[1], question=row[2], answer=row[3], section=row[4])
