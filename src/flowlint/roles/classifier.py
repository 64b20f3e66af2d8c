"""Role classifier: picks one role per element from its detectors' opinions."""

from __future__ import annotations

import logging
from typing import Sequence

from flowlint.model.element import ElementRole, ElementSnapshot, RoleDetectionResult
from flowlint.model.preset import DetectionContext, RoleDetectionConfig, RoleDetector

logger = logging.getLogger("flowlint.roles")


class RoleClassifier:
    """Runs an ordered list of detectors and selects the best opinion.

    The highest score wins; on equal scores the earlier detector wins. A
    best score below the threshold yields the fallback role, or
    ``ElementRole.UNKNOWN`` when none is configured.
    """

    def __init__(
        self,
        detectors: Sequence[RoleDetector],
        config: RoleDetectionConfig | None = None,
    ) -> None:
        self._detectors = list(detectors)
        self._config = config or RoleDetectionConfig()

    @property
    def threshold(self) -> float:
        return self._config.threshold

    @property
    def fallback_role(self) -> ElementRole:
        return self._config.fallback_role or ElementRole.UNKNOWN

    def detect(
        self, element: ElementSnapshot, context: DetectionContext
    ) -> list[tuple[str, RoleDetectionResult]]:
        """Every non-null opinion, in detector order."""
        opinions: list[tuple[str, RoleDetectionResult]] = []
        for detector in self._detectors:
            try:
                result = detector.detect(element, context)
            except Exception:
                logger.warning(
                    "Role detector %s failed on element %s",
                    getattr(detector, "id", detector),
                    element.id,
                    exc_info=True,
                )
                continue
            if result is not None:
                opinions.append((getattr(detector, "id", ""), result))
        return opinions

    def best(
        self, element: ElementSnapshot, context: DetectionContext
    ) -> RoleDetectionResult | None:
        """Highest-scoring opinion regardless of threshold."""
        best: RoleDetectionResult | None = None
        for _, result in self.detect(element, context):
            if best is None or result.score > best.score:
                best = result
        return best

    def classify(self, element: ElementSnapshot, context: DetectionContext) -> ElementRole:
        best = self.best(element, context)
        if best is None or best.score < self.threshold:
            return self.fallback_role
        return best.role

    def classify_all(self, context: DetectionContext) -> dict[str, ElementRole]:
        """Role for every element in ``context``, in element order."""
        roles = {el.id: self.classify(el, context) for el in context.all_elements}
        logger.debug("Classified %d elements", len(roles))
        return roles
