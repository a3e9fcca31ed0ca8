"""Application Layer.

Configuration, orchestration services and infrastructure adapters around the
domain. This layer is where I/O-capable code and external formats live.
"""
