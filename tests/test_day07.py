import pytest

from aoc2022.solutions.day07 import DirectoryNode, FileNode, part_one, part_two

EXAMPLE = """$ cd /
$ ls
dir a
14848514 b.txt
8504156 c.dat
dir d
$ cd a
$ ls
dir e
29116 f
2557 g
62596 h.lst
$ cd e
$ ls
584 i
$ cd ..
$ cd ..
$ cd d
$ ls
4060174 j
8033020 d.log
5626152 d.ext
7214296 k
"""


def test_part_one():
    assert part_one(EXAMPLE) is None


def test_part_two():
    assert part_two(EXAMPLE) is None


def test_leaving_root_raises():
    with pytest.raises(ValueError):
        part_one("$ cd /\n$ cd ..\n")


def test_directory_size_sums_nested_children():
    root = DirectoryNode("root")
    sub = DirectoryNode("a")
    sub.add_child(FileNode("f", 29116))
    sub.add_child(FileNode("g", 2557))
    root.add_child(sub)
    root.add_child(FileNode("b.txt", 14848514))
    assert sub.size() == 31673
    assert root.size() == 14880187


def test_add_child_sets_parent():
    root = DirectoryNode("root")
    sub = DirectoryNode("a")
    root.add_child(sub)
    assert sub.parent is root
    assert root.find_directory("a") is sub
    assert root.find_directory("missing") is None


def test_size_is_cached():
    root = DirectoryNode("root")
    root.add_child(FileNode("x", 10))
    assert root.size() == 10
    root.add_child(FileNode("y", 5))
    assert root.size() == 10
    assert root.cached_size == 10