"""OSCALViz - OSCAL profile resolution and assessment aggregation.

Resolves profile imports against their catalogs into a single control
baseline and rolls assessment results up into per-family summaries
for visualization.
"""

__version__ = "0.1.0"
