"""Data models for land claims, decisions and workflow state."""

from .claim import Coordinate, Purpose, DEFAULT_PURPOSE
from .decision import Decision, Verdict
from .workflow import View, WorkflowState

__all__ = [
    'Coordinate',
    'Purpose',
    'DEFAULT_PURPOSE',
    'Decision',
    'Verdict',
    'View',
    'WorkflowState',
]
