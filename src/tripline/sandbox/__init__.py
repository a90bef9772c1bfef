"""Local development backend serving the Tripline endpoint contracts."""

from .app import build_router, create_app
from .mock_data import SandboxScenario

__all__ = ["SandboxScenario", "build_router", "create_app"]
