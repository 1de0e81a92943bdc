"""Vector, interval, ray and bounding-box primitives."""
