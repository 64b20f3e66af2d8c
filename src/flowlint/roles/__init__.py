"""Role detection: detectors, token maps and the classifier."""

from flowlint.roles.classifier import RoleClassifier
from flowlint.roles.detectors import (
    ElementTokenDetector,
    MainDetector,
    SectionDetector,
    WrapperDetector,
    WrapperGates,
    classify_wrap_name,
)
from flowlint.roles.tokens import CONTAINER_LIKE_ROLES, is_container_token, role_for_token

__all__ = [
    "RoleClassifier",
    "MainDetector",
    "SectionDetector",
    "WrapperDetector",
    "WrapperGates",
    "ElementTokenDetector",
    "classify_wrap_name",
    "CONTAINER_LIKE_ROLES",
    "is_container_token",
    "role_for_token",
]
