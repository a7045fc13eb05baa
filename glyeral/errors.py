"""Domain exceptions for the recommendation service."""


class GlyeralError(Exception):
    """Base class for errors raised by glyeral."""


class BlockedRecommendationError(GlyeralError):
    """A blocked recommendation cannot be accepted or modified."""

    def __init__(self, drug_id: str, reason: str | None = None):
        self.drug_id = drug_id
        self.reason = reason
        message = f"{drug_id} is blocked and cannot be prescribed"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class AlreadyActionedError(GlyeralError):
    """The recommendation was already accepted, modified or rejected."""

    def __init__(self, drug_id: str, action: str):
        self.drug_id = drug_id
        self.action = action
        super().__init__(f"{drug_id} was already {action}; regenerate recommendations to act again")



class UnverifiedRecommendationError(GlyeralError):
    """The recommendation was not issued for this patient, or differs from what was issued."""

    def __init__(self, patient_id: str, drug_id: str, reason: str):
        self.patient_id = patient_id
        self.drug_id = drug_id
        self.reason = reason
        super().__init__(f"{drug_id} for patient {patient_id} {reason}; regenerate recommendations")


class AuditTrailError(GlyeralError):
    """The audit file cannot be read as an append-only trail."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Audit trail {path} {reason}; refusing to write to it")
