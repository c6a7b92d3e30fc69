from typing import Literal
from uuid import UUID
from pydantic import BaseModel, ConfigDict, ValidationError
from quizhost.app.domain.errors import MalformedSession


"""
Group Entity:
1. id (UUID): Unique identifier for the group.
2. quiz_id (UUID): Identifier of the quiz the group signed up for.
3. name (str): Display name chosen by the participants. Not unique within a quiz.

The whole group is carried inside the participant's cookie, so serialize() and
deserialize() have to keep reading every version that was ever written.
"""
class Group(BaseModel):
    id: UUID
    quiz_id: UUID
    name: str

    @classmethod
    def from_row(cls, row: tuple) -> "Group":
        return cls(id=row[0], quiz_id=row[1], name=row[2])

    def serialize(self) -> str:
        return GroupCookie(**self.model_dump()).model_dump_json()

    @classmethod
    def deserialize(cls, value: str) -> "Group":
        if not isinstance(value, (str, bytes)):
            raise MalformedSession("Group payload is not text")
        try:
            payload = GroupCookie.model_validate_json(value)
        except ValidationError as e:
            raise MalformedSession(f"Group payload has unexpected shape: {e}") from e
        return cls(id=payload.id, quiz_id=payload.quiz_id, name=payload.name)


"""
Cookie form of a Group. Strict so that 1.0, true or "1" are not taken for
version 1 and a numeric name is not coerced. Cookies written before versioning
have no "v" and read as version 1; unknown keys are ignored so newer fields
don't break older readers.
"""
class GroupCookie(Group):
    model_config = ConfigDict(strict=True, extra='ignore')

    v: Literal[1] = 1
