from quizhost.presentation.handlers import start_handlers, host_handlers, participant_handlers

__all__ = ["start_handlers", "host_handlers", "participant_handlers"]
