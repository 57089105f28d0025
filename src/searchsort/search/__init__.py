"""
Search helpers for the surrounding-documents view of a log explorer.

The view anchors on one document and fetches its predecessors and successors.
This package provides the pieces needed to build those two queries:
- Picking a sortable tie breaker field from an index pattern
- Reversing the anchor's sort clause for the opposite direction
"""
