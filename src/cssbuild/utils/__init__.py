"""Utility components for cssbuild."""

from cssbuild.utils.files import get_project_root, init_cssbuild, is_initialized
from cssbuild.utils.logging import setup_local_logging

__all__ = [
    'get_project_root',
    'init_cssbuild',
    'is_initialized',
    'setup_local_logging',
]
