"""
linkgopher: convert network share links between Windows (file:\\\\host\\share)
and Mac (smb://host/share) notation.
"""

__version__ = "0.1.0"
