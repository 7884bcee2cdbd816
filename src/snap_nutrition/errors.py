"""Exceptions raised by the recognition pipeline and the meal ledger."""

from uuid import UUID


class RecognitionError(Exception):
    """Base class for failures while turning an image into a prediction."""

    code = "recognition_failed"


class ClassifierUnavailable(RecognitionError):
    """The classification service failed to load, run or answer in time."""

    code = "classifier_unavailable"


class NoPrediction(RecognitionError):
    """The classification service returned no predictions."""

    code = "no_prediction"

    def __init__(self, message: str = "Classifier returned no predictions") -> None:
        super().__init__(message)


class EntryNotFound(KeyError):
    """A meal entry id is not present in the ledger."""

    def __init__(self, entry_id: UUID) -> None:
        super().__init__(str(entry_id))
        self.entry_id = entry_id


class InvalidImage(ValueError):
    """Uploaded data is not an image the pipeline accepts."""
