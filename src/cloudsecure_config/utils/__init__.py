"""Utility functions for cloudsecure_config."""

from .interactive import Prompter, pick_profile_name
from .system import ensure_dir

__all__ = [
    "Prompter",
    "pick_profile_name",
    "ensure_dir",
]
