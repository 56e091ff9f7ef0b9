"""Application layer – field schemas, pagination primitives and the filter compiler."""
