"""Data-structure and algorithm exercises, with a grader that scores exercise projects."""

__version__ = "0.1.0"