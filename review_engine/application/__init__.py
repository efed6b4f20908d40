"""Application layer - use-case orchestration over domain aggregates.

Services here load aggregates through ports, invoke domain methods
(which enforce invariants), persist, and shape DTOs for callers.
"""
