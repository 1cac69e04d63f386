"""
Deterministic quote calculators.

Pure Python math. Allocators turn patterns into per-stone coverage,
the splitter turns coverage into pickup line items, and the add-on
computer prices sealant and polymeric sand.
"""
