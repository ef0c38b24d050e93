"""Advent of Code 2022 solutions and a command-line tool for scaffolding, solving and benchmarking them."""

__version__ = "0.1.0"