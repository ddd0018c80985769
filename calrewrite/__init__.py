"""
calrewrite – rewrite a TimeEdit calendar feed using its CSV export.
"""

from calrewrite.errors import RewriteError
from calrewrite.pipeline import run_pipeline

__all__ = ["RewriteError", "run_pipeline"]
