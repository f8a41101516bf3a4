"""
Analysis layer exceptions.
"""


class AnalysisError(Exception):
    """Base exception for analysis layer errors."""

    def __init__(self, message: str, detector_id: str | None = None):
        self.detector_id = detector_id
        super().__init__(message)


class DetectorConfigError(AnalysisError):
    """Detector table could not be loaded or compiled."""

    def __init__(self, message: str, detector_id: str | None = None):
        if detector_id:
            message = f"Detector '{detector_id}': {message}"
        super().__init__(message, detector_id=detector_id)
