"""Workflow engine for tix."""

from tix.engine.orchestrator import CreateWorkflow

__all__ = ["CreateWorkflow"]
