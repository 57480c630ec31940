"""Citation style renderers, one module per style."""
