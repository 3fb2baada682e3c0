"""
Built-in agent definitions.
"""

from __future__ import annotations

from ..base import AgentSpec
from .content import CONTENT_AGENT
from .deployment import DEPLOYMENT_AGENT
from .design import DESIGN_AGENT
from .frontend import FRONTEND_AGENT
from .performance import PERFORMANCE_AGENT
from .pr import PR_AGENT
from .responsive import RESPONSIVE_AGENT
from .security import SECURITY_AGENT
from .testing import TESTING_AGENT
from .translation import TRANSLATION_AGENT

# Agent spec registry, in registration order
AGENT_SPECS: dict[str, AgentSpec] = {
    spec.id: spec
    for spec in (
        DESIGN_AGENT,
        FRONTEND_AGENT,
        CONTENT_AGENT,
        TESTING_AGENT,
        PERFORMANCE_AGENT,
        SECURITY_AGENT,
        RESPONSIVE_AGENT,
        DEPLOYMENT_AGENT,
        TRANSLATION_AGENT,
        PR_AGENT,
    )
}

__all__ = [
    "AGENT_SPECS",
    "CONTENT_AGENT",
    "DEPLOYMENT_AGENT",
    "DESIGN_AGENT",
    "FRONTEND_AGENT",
    "PERFORMANCE_AGENT",
    "PR_AGENT",
    "RESPONSIVE_AGENT",
    "SECURITY_AGENT",
    "TESTING_AGENT",
    "TRANSLATION_AGENT",
]
