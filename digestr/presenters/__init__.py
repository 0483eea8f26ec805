"""
Output presenters for the digestr CLI.
"""

from .listing import format_algorithm_list
from .output import write_output

__all__ = ["format_algorithm_list", "write_output"]
