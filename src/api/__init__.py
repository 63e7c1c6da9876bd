"""HTTP surface over the GitHub client."""

from .app import create_app
from .errors import write_error

__all__ = ["create_app", "write_error"]
