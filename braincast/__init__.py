"""BrainCast quiz and social challenge backend."""
