"""Shared type definitions for type checking.

Uses NewType for IDs to provide compile-time type safety - prevents mixing
different ID types (e.g., passing UserID where ArticleID expected).

Uses TypeAlias for complex types that are purely structural.
"""

from typing import NewType, TypeAlias

# ID types using NewType for type safety
# Store ids are integers (identity columns)
ArticleID = NewType("ArticleID", int)
CategoryID = NewType("CategoryID", int)
SourceID = NewType("SourceID", int)
UserID = NewType("UserID", int)
KeywordID = NewType("KeywordID", int)

# Structural aliases using TypeAlias
KeywordList: TypeAlias = list[str]
ProviderName: TypeAlias = str  # e.g. "NewsAPI", "TheNewsAPI"
RunID: TypeAlias = str

# Audit id stamped on records created by background jobs (not a real user)
SYSTEM_USER_ID: UserID = UserID(-1)
