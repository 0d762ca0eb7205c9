# planwright/planning/__init__.py
"""
Heuristic planning pipeline.

Extraction, scoring, viewpoint selection, synthesis and enrichment of
phased implementation workflows.
"""
