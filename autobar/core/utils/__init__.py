"""Path helpers shared by the traversal modules."""
