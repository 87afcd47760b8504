"""Services Layer: request routing, tool dispatch and Attio operation handlers.

Invariants:
    - Handlers split by record family (max 4 methods each)
    - Tool dispatch uses explicit dict mapping (no auto-discovery)

Design Decisions:
    - One handler file per record family for locality (ADR: ExMA no god objects)
"""
