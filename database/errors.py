# database/errors.py
"""
Error taxonomy for the disease catalog.

Every failure raised by the store or the record service derives from
DiseaseStoreError, so callers can catch the family or a single case.
"""


class DiseaseStoreError(Exception):
    """Base class for catalog errors."""


class StorageUnavailable(DiseaseStoreError):
    """The backing database cannot be opened or its schema cannot be created."""


class StorageError(DiseaseStoreError):
    """An I/O failure while running a catalog operation."""


class ValidationError(StorageError):
    """The store rejected a record, e.g. a required field was missing."""


class NotFound(DiseaseStoreError):
    """No record exists for the requested id."""

    def __init__(self, disease_id: int):
        super().__init__(f"Disease {disease_id} not found")
        self.disease_id = disease_id
