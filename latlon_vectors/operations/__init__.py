"""Composite operations built from the pairwise point algebra.

Each module performs a single geometric task:
- intersection: Meeting point of two great-circle paths
- cross_track: Signed distance from a point to a great-circle path
- enclosure: Point-in-convex-polygon test with convexity validation
- mean: Geographic mean (centroid direction) of a set of points
"""
