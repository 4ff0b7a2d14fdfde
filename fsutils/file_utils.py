"""Module-level filesystem helpers backed by shared default instances."""
from typing import List, Optional

from fsutils.infrastructure.filesystem import (
    DirectoryCreator,
    FileCopier,
    FileLister,
    FileMover,
    FileRemover,
)
from fsutils.infrastructure.filesystem.file_lister import NameFilter
from fsutils.infrastructure.filesystem.paths import PathLike

directory_creator = DirectoryCreator()
remover = FileRemover()
copier = FileCopier(directory_creator)
mover = FileMover(directory_creator, copier, remover)
lister = FileLister()


async def mkdirs(path: PathLike, mode: Optional[int] = None) -> None:
    await directory_creator.mkdirs(path, mode)


def mkdirs_sync(path: PathLike, mode: Optional[int] = None) -> None:
    directory_creator.mkdirs_sync(path, mode)


async def move(source: PathLike, destination: PathLike) -> None:
    await mover.move(source, destination)


def move_sync(source: PathLike, destination: PathLike) -> None:
    mover.move_sync(source, destination)


async def copy(source: PathLike, destination: PathLike) -> None:
    await copier.copy(source, destination)


def copy_sync(source: PathLike, destination: PathLike) -> None:
    copier.copy_sync(source, destination)


async def delete_file(path: PathLike) -> None:
    await remover.delete_file(path)


def delete_file_sync(path: PathLike) -> None:
    remover.delete_file_sync(path)


async def delete_file_quietly(path: PathLike) -> None:
    await remover.delete_file_quietly(path)


def delete_file_quietly_sync(path: PathLike) -> None:
    remover.delete_file_quietly_sync(path)


async def list_files(
    directory: PathLike,
    file_filter: NameFilter,
    dir_filter: Optional[NameFilter] = None,
) -> List[str]:
    return await lister.list_files(directory, file_filter, dir_filter)


def list_files_sync(
    directory: PathLike,
    file_filter: NameFilter,
    dir_filter: Optional[NameFilter] = None,
) -> List[str]:
    return lister.list_files_sync(directory, file_filter, dir_filter)
