"""
Custom Exceptions - EOQ Meme Platform
eoq_platform/core/exceptions.py

Custom exception classes for engine preconditions, the session store and
the analysis layer.
"""


class EngineException(Exception):
    """Base exception for scoring and refinement engine precondition violations."""

    pass


class EmptyUniverseError(EngineException, ValueError):
    """define_by_negation called with an empty universe (nullness undefined)."""

    def __init__(self, label: str):
        self.label = label
        super().__init__(
            f"Cannot define '{label}' by negation over an empty universe"
        )


class ContextKindError(EngineException, TypeError):
    """A context lacks the situational factors an operation requires."""

    def __init__(self, operation: str, kind: str):
        self.operation = operation
        self.kind = kind
        super().__init__(
            f"{operation} requires a situated context, got kind '{kind}'"
        )


class MemeStoreException(Exception):
    """Base exception for session store operations."""

    pass


class MemeNotFoundException(MemeStoreException):
    """Meme not found in the session store."""

    def __init__(self, meme_id: str):
        self.meme_id = meme_id
        super().__init__(f"Meme with ID {meme_id} not found")


class DuplicateMemeException(MemeStoreException):
    """A meme with the same ID already exists."""

    def __init__(self, meme_id: str):
        self.meme_id = meme_id
        super().__init__(f"Meme with ID {meme_id} already exists")


class AnalysisParseError(Exception):
    """An analysis response could not be parsed into a meme."""

    def __init__(self, message: str = "Could not parse analysis response"):
        self.message = message
        super().__init__(message)
