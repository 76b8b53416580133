"""
git-recent - Switch between local git branches, most recently changed first
"""

from .__version__ import __version__
from .core import BranchController
from .cli.main import main

__all__ = ["BranchController", "main", "__version__"]
