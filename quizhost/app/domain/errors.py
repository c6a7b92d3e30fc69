class QuizHostError(Exception):
    pass


class NotFound(QuizHostError):
    """Referenced entity id does not resolve to a stored row."""


class PersistenceError(QuizHostError):
    """Store read/write failure, including constraint violations and timeouts."""


class MalformedSession(QuizHostError):
    """Cookie payload could not be unsealed or decoded into the expected shape."""


class ConfigurationError(QuizHostError):
    """Required startup configuration is missing or invalid."""
