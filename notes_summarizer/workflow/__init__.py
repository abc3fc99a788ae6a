"""
Workflow Module

Session state, its transitions, the relay handlers, and the controller
that drives the upload -> summarize -> send workflow.
"""

from .controller import RelayClient, WorkflowController
from .relays import LocalRelay
from .session import Notification, SessionState, TransitionResult

__all__ = ["LocalRelay", "RelayClient", "WorkflowController", "Notification", "SessionState", "TransitionResult"]
