"""Application layer: ports and use cases of the correlated facade."""
