# simple_kmeans.py
# Deterministic K-Means for 2-D integer points, plain Python only.

import math
from collections import namedtuple

import settings
from mylog import MyLogger

log = MyLogger.get_logger()

KMeansResult = namedtuple("KMeansResult", ["labels", "centroids", "iterations", "converged"])


class InvalidArgument(ValueError):
    """Raised when k (or the iteration cap) does not fit the point set."""


def mean(block):
    n = len(block)
    return (sum(p[0] for p in block) / n, sum(p[1] for p in block) / n)


def distance(a, b):
    return math.sqrt((b[0] - a[0]) ** 2 + (b[1] - a[1]) ** 2)


def initial_blocks(points, k):
    """
    Split points, in order, into k contiguous blocks.
    The first k-1 blocks hold len(points) // k points each; the last one
    takes everything that is left.
    """
    if k < 1:
        raise InvalidArgument(f"k must be at least 1, got {k}")
    block_size = len(points) // k
    if block_size == 0:
        raise InvalidArgument(f"k={k} is larger than the number of points ({len(points)})")

    blocks = []
    # interior blocks
    for i in range(k - 1):
        blocks.append(points[i * block_size:(i + 1) * block_size])
    # final remainder block
    blocks.append(points[(k - 1) * block_size:])
    return blocks


def initial_centroids(points, k):
    """returns k centroids, one per block from initial_blocks"""
    return [mean(block) for block in initial_blocks(points, k)]


def nearest_centroids(points, centroids):
    """
    points: sequence of (x, y)
    centroids: sequence of (x, y)
    returns: list with the index of the closest centroid for every point
    """
    labels = []
    for p in points:
        best_j = 0
        best_d = distance(centroids[0], p)
        for j in range(1, len(centroids)):
            d = distance(centroids[j], p)
            # strict comparison: on ties the lower index wins
            if d < best_d:
                best_d = d
                best_j = j
        labels.append(best_j)
    return labels


def update_centroids(points, labels, previous):
    """
    Recompute every centroid as the mean of the points labelled with it.
    A centroid with no points keeps its previous position.
    """
    k = len(previous)
    sums = [[0.0, 0.0] for _ in range(k)]
    counts = [0] * k
    for lbl, p in zip(labels, points):
        counts[lbl] += 1
        sums[lbl][0] += p[0]
        sums[lbl][1] += p[1]

    centroids = []
    for j in range(k):
        if counts[j] == 0:
            log.warning("cluster %d is empty, keeping centroid %s", j, previous[j])
            centroids.append(tuple(previous[j]))
        else:
            centroids.append((sums[j][0] / counts[j], sums[j][1] / counts[j]))
    return centroids


def assignments_converged(previous, current):
    if previous is None or current is None:
        return False
    if len(previous) != len(current):
        return False
    return all(a == b for a, b in zip(previous, current))


def kmeans(points, k, max_iter=None):
    """
    points: sequence of (x, y) integer pairs
    k: number of clusters, 1 <= k < len(points)
    max_iter: iteration cap, defaults to settings.MAX_ITER
    returns: KMeansResult(labels, centroids, iterations, converged)
    """
    n = len(points)
    if k < 1:
        raise InvalidArgument(f"k must be an integer greater than 0, got {k}")
    if k >= n:
        raise InvalidArgument(f"k must be less than the number of data tuples ({n}), got {k}")
    if max_iter is None:
        try:
            max_iter = int(settings.MAX_ITER)
        except ValueError as e:
            raise InvalidArgument(f"KMEANS_MAX_ITER must be an integer, got {settings.MAX_ITER!r}") from e
    if max_iter < 1:
        raise InvalidArgument(f"max_iter must be at least 1, got {max_iter}")

    centroids = initial_centroids(points, k)
    previous = [0] * n
    labels = previous
    converged = False
    iterations = 0

    while not converged:
        if iterations == max_iter:
            log.warning("k-means did not converge after %d iterations, returning last assignment", max_iter)
            break
        iterations += 1
        labels = nearest_centroids(points, centroids)
        centroids = update_centroids(points, labels, centroids)
        converged = assignments_converged(previous, labels)
        previous = labels

    log.debug("k-means stopped after %d iterations (converged=%s)", iterations, converged)
    return KMeansResult(labels, centroids, iterations, converged)
