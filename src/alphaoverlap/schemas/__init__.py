"""JSON schemas bundled with alphaoverlap."""
