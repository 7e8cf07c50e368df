"""Adapters: httpx-backed I/O (request building, transport, decoding) and
the per-resource surfaces."""
