"""Tool definitions, one module per family."""
