"""flowlint: naming-convention linter for visual page builder class names."""

__version__ = "0.4.0"

from flowlint.config import LinterConfig  # noqa: E402
from flowlint.errors import (  # noqa: E402
    ConfigValidationError,
    ConfigurationError,
    FlowlintError,
    HostError,
    PresetResolutionError,
)
from flowlint.linter import Linter  # noqa: E402

__all__ = [
    "__version__",
    "Linter",
    "LinterConfig",
    "FlowlintError",
    "ConfigurationError",
    "ConfigValidationError",
    "PresetResolutionError",
    "HostError",
]
