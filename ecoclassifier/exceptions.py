"""
Exception hierarchy for ecosystem classification.

    EcoClassifierError (base)
    +-- InvalidInputError   malformed input record at a loading boundary
    +-- DecodingError       modern-data buffer is not valid UTF-8
    +-- ConfigurationError  trained model used before training
    +-- UsageError          unknown or missing CLI command
"""


class EcoClassifierError(Exception):
    """Base exception for classification errors."""

    detail = "Classification error"

    def __init__(self, detail: str = None):
        self.detail = detail or self.__class__.detail
        super().__init__(self.detail)


class InvalidInputError(EcoClassifierError):
    detail = "Invalid input"


class DecodingError(EcoClassifierError):
    detail = "Input could not be decoded as UTF-8"


class ConfigurationError(EcoClassifierError):
    detail = "Classifier used before training completed"


class UsageError(EcoClassifierError):
    detail = "Invalid command usage"
