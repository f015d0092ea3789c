"""
NoteHive Backend - Social Notes Sharing Platform

Upload documents, browse and search them by text and tags, like, bookmark,
comment, follow other users and receive notifications.

Version: 1.0.0
"""

__version__ = "1.0.0"
