import random
import uuid


QUIZ_CODE_MIN = 1000
QUIZ_CODE_MAX = 9999


def new_id() -> uuid.UUID:
    """
    Generates a random 128-bit identifier used as primary key for quizzes,
    questions and groups.

    :return: A version 4 UUID.
    """
    return uuid.uuid4()


def new_quiz_code() -> int:
    """
    Generates a 4-digit code the host can share with participants.

    Codes are not checked against existing quizzes, so two quizzes may end up
    with the same code.

    :return: An integer in [1000, 9999].
    """
    return random.randint(QUIZ_CODE_MIN, QUIZ_CODE_MAX)
