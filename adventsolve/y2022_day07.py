"""No space left on device: size up directories from a terminal session."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Optional, Union

FS_SPACE = 70_000_000
UPDATE_SPACE = 30_000_000
SMALL_DIRECTORY_LIMIT = 100_000


@dataclass
class File:
    """A plain file with a size."""

    name: str
    size: int


@dataclass
class Directory:
    """A directory holding files and further directories."""

    name: str
    parent: Optional[Directory] = field(default=None, repr=False, compare=False)
    children: list[Union[File, Directory]] = field(default_factory=list)

    def size(self) -> int:
        """Total size of every file below this directory."""
        return sum(
            child.size if isinstance(child, File) else child.size()
            for child in self.children
        )

    def walk(self) -> Iterator[Directory]:
        """This directory and every directory below it."""
        yield self
        for child in self.children:
            if isinstance(child, Directory):
                yield from child.walk()

    def subdirectory(self, name: str) -> Optional[Directory]:
        """The last listed subdirectory called ``name``, if any."""
        found = None
        for child in self.children:
            if isinstance(child, Directory) and child.name == name:
                found = child
        return found

    def add_listing_entry(self, line: str) -> None:
        """Record one line of ``ls`` output as a child."""
        if line.startswith("dir"):
            self.children.append(Directory(line.removeprefix("dir "), parent=self))
        else:
            size, name = line.split(" ", 1)
            self.children.append(File(name, int(size)))

    def size_under_100k(self) -> int:
        """Sum of the sizes of all directories of at most 100000."""
        return sum(
            size
            for size in (directory.size() for directory in self.walk())
            if size <= SMALL_DIRECTORY_LIMIT
        )

    def size_just_right(self, required: int) -> int:
        """Size of the smallest directory larger than ``required``.

        Returns the whole file system space when no directory qualifies.
        """
        return min(
            (size for size in (d.size() for d in self.walk()) if size > required),
            default=FS_SPACE,
        )


def parse(text: str) -> Directory:
    """Replay the terminal session and return the root directory."""
    lines = text.removesuffix("\n").split("\n")
    root = Directory("/")
    cwd = root
    index = 0
    while index < len(lines):
        line = lines[index]
        index += 1
        if not line.startswith("$ "):
            raise ValueError(f"expected a command, got {line!r}")
        words = line[2:].split(" ")
        if words[0] == "cd":
            if len(words) < 2:
                raise ValueError(f"cd without a target: {line!r}")
            target = words[1]
            if target == "/":
                cwd = root
            elif target == "..":
                if cwd.parent is None:
                    raise ValueError("cannot leave the root directory")
                cwd = cwd.parent
            else:
                cwd = cwd.subdirectory(target) or cwd
        elif words[0] == "ls":
            while index < len(lines) and not lines[index].startswith("$"):
                cwd.add_listing_entry(lines[index])
                index += 1
    return root


def part1(root: Directory) -> int:
    """Sum of the sizes of directories of at most 100000."""
    return root.size_under_100k()


def part2(root: Directory) -> int:
    """Size of the smallest directory whose deletion frees enough space."""
    required = UPDATE_SPACE - (FS_SPACE - root.size())
    return root.size_just_right(required)