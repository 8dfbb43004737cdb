"""Routing: a segment trie that maps pathnames to application metadata.

Routes are registered once when a ``Router`` is constructed and compiled
into an immutable lookup structure; metadata is memoized per pathname.
"""
