# sample_points.py
# Write a reproducible sample input file for kmeans2d.
# Run standalone: python sample_points.py [path]

import os
import sys

import numpy as np
import pandas as pd

POINTS_FILE = "points.txt"

CENTERS = [(0, 0), (50, 50), (100, 0)]


def make_blobs(centers=CENTERS, per_cluster=20, spread=5.0, seed=42):
    """returns an (n, 2) int64 array of points scattered around each center, cluster by cluster"""
    rng = np.random.default_rng(seed)
    blobs = []
    for cx, cy in centers:
        offsets = rng.normal(0.0, spread, size=(per_cluster, 2))
        blobs.append(np.rint(offsets + (cx, cy)).astype(np.int64))
    return np.vstack(blobs)


def seed(path=POINTS_FILE, centers=CENTERS, per_cluster=20, spread=5.0, random_state=42):
    if os.path.exists(path):
        os.remove(path)

    points = make_blobs(centers, per_cluster, spread, random_state)
    # shuffle so the contiguous initial blocks do not line up with the blobs
    rng = np.random.default_rng(random_state + 1)
    points = points[rng.permutation(len(points))]

    pd.DataFrame(points).to_csv(path, sep=" ", header=False, index=False)
    print("Sample points written:", path, f"({len(points)} points, {len(centers)} centers)")
    return path


if __name__ == "__main__":
    seed(sys.argv[1] if len(sys.argv) > 1 else POINTS_FILE)
