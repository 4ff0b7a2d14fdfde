"""Filesystem infrastructure module."""
from .directory_creator import DirectoryCreator, current_umask, default_mode
from .file_copier import FileCopier
from .file_lister import FileLister
from .file_mover import FileMover
from .file_remover import FileRemover
from .paths import resolve_path

__all__ = [
    'DirectoryCreator',
    'FileCopier',
    'FileLister',
    'FileMover',
    'FileRemover',
    'current_umask',
    'default_mode',
    'resolve_path',
]
