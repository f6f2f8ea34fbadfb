"""Pattern compilation, matching and dispatch internals."""
