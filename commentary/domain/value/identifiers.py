"""Strongly typed identifiers for commentary domain entities.

Identifiers are database-assigned integers. ``0`` is never assigned to a
real comment: it stands for the virtual root that top-level comments hang off.
"""

from typing import NewType

CommentId = NewType("CommentId", int)
PostId = NewType("PostId", int)

# Parent id of top-level comments
ROOT_COMMENT_ID = CommentId(0)
