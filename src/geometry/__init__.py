"""Ray-intersectable geometry: spheres, lists and the BVH."""
