"""Camera model and sample ray generation."""
