"""Core pipeline: HTTP layer, share page stages and upload stages."""
