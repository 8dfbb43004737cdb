"""Server-side preloading: decide which sub-calls a request path needs.

Matching here is linear and first-match-wins in declaration order, unlike
the client trie, which prefers static segments over parameters.
"""
