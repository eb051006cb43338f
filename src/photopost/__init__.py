"""photopost: photo upload and crop front-end for social media publishing."""

__version__ = "0.1.0"
