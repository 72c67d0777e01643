"""Line diffing, text loading, directory comparison and git status for diff viewers."""

__version__ = "0.1.0"