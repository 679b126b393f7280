"""Console rendering of timing results."""
