# topmark:header:start
#
#   project      : XmlMode
#   file         : results.py
#   file_relpath : src/xmlmode/results.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-location detection outcomes.

`run_detection` resolves each location, runs the detector and turns resource
and read failures into `DetectionResult` records, so a batch keeps going when one
input is missing or unreadable. Click-free; the CLI maps statuses to exit codes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from xmlmode.config.logging import get_logger
from xmlmode.detector.errors import ValidationModeReadError
from xmlmode.detector.mode import ValidationMode
from xmlmode.resources.errors import ResourceError, ResourceNotFoundError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from xmlmode.config.logging import XmlModeLogger
    from xmlmode.detector.engine import XmlValidationModeDetector

logger: XmlModeLogger = get_logger(__name__)


class DetectionStatus(str, Enum):
    """How a location was processed.

    Attributes:
        DETECTED: The detector ran to completion (the mode may still be ``AUTO``).
        NOT_FOUND: The location does not exist.
        READ_ERROR: The location exists but could not be opened or read.
    """

    DETECTED = "detected"
    NOT_FOUND = "not_found"
    READ_ERROR = "read_error"


@dataclass(frozen=True)
class DetectionResult:
    """Outcome of detecting one location.

    Attributes:
        location (str): The location as given (or as expanded from a directory).
        mode (ValidationMode | None): Detected mode; None when an error occurred.
        error (str | None): Error message when the location could not be processed.
        status (DetectionStatus): Processing status.
    """

    location: str
    mode: ValidationMode | None
    error: str | None = None
    status: DetectionStatus = DetectionStatus.DETECTED

    @property
    def is_error(self) -> bool:
        """True if the location could not be opened or read (``mode`` is then None)."""
        return self.status is not DetectionStatus.DETECTED

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly mapping."""
        return {
            "location": self.location,
            "status": self.status.value,
            "mode": self.mode.key if self.mode is not None else None,
            "code": int(self.mode) if self.mode is not None else None,
            "error": self.error,
        }


def detect_one(detector: XmlValidationModeDetector, location: str) -> DetectionResult:
    """Detect the validation mode of ``location``, capturing failures in the result.

    Args:
        detector (XmlValidationModeDetector): Detector (and resource loader) to use.
        location (str): Path, URL, ``package:`` location or ``-``.

    Returns:
        DetectionResult: The outcome for ``location``.
    """
    try:
        mode: ValidationMode = detector.detect_location(location)
    except (ResourceNotFoundError, FileNotFoundError) as e:
        logger.error("Not found: %s: %s", location, e)
        return DetectionResult(location, None, str(e), DetectionStatus.NOT_FOUND)
    except (ValidationModeReadError, ResourceError, OSError) as e:
        logger.error("Cannot read %s: %s", location, e)
        return DetectionResult(location, None, str(e), DetectionStatus.READ_ERROR)
    return DetectionResult(location, mode)


def run_detection(
    detector: XmlValidationModeDetector,
    locations: Iterable[str],
) -> list[DetectionResult]:
    """Detect every location in order; see `detect_one`."""
    return [detect_one(detector, loc) for loc in locations]


def count_modes(results: Iterable[DetectionResult]) -> dict[str, int]:
    """Count results by mode key (``"error"`` for failed locations), in enum order."""
    counts: dict[str, int] = {}
    for r in results:
        key: str = r.mode.key if r.mode is not None else "error"
        counts[key] = counts.get(key, 0) + 1
    order: list[str] = [m.key for m in ValidationMode] + ["error"]
    return {k: counts[k] for k in order if k in counts}
