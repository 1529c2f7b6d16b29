"""Search orchestration over notice collections."""

from .models import SearchRunResult
from .runner import SearchPipeline

__all__ = ["SearchPipeline", "SearchRunResult"]
