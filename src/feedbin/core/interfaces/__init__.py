"""Core contracts (Protocol) implemented by adapters.

`FeedbinClient` sends through `Transport`, so any object with the same
`send`/`close` shape can replace the httpx-backed one.
"""
