"""Input validation errors raised at the engine boundary."""


class MindfulTasksError(ValueError):
    """Base class for invalid input handed to the engine."""


class InvalidTaskError(MindfulTasksError):
    """A task record cannot be scored."""


class InvalidCompletionError(MindfulTasksError):
    """A completed-task record cannot be analyzed."""
