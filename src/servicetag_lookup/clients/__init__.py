"""Remote dataset clients."""
