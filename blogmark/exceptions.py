"""
Custom exception classes for blogmark.

The markup converter and the paragraph segmenter never raise; these
exceptions belong to insertion planning and the outer surfaces.
"""


class BlogmarkError(Exception):
    """Base exception for all blogmark errors."""
    pass


class ValidationError(BlogmarkError):
    """Invalid insertion target, media address, format name or selection."""
    pass


class SecurityError(BlogmarkError):
    """Error related to input size limits."""
    pass
