"""
bwd: Better Working Directory.

This package provides components for:
- Resolving an optional target path against the current working directory
- Finding the enclosing project root by walking up to a marker (.git, .bwdroot)
- Shortening paths under the home directory ($HOME / %USERPROFILE%)
- Printing the result as plain text or a single-line JSON record
"""

__version__ = "0.1.0"
