"""Domain models shared across tix."""

from tix.models.domain import CreateResult, Issue, MaterializedBranch

__all__ = ["CreateResult", "Issue", "MaterializedBranch"]
