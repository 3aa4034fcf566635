# kmeans_cli.py
# Command line entry point: kmeans2d [k] [file name]

import argparse
import sys
import time

import settings
from mylog import MyLogger
from points_io import PointFileError, load_points, write_assignments
from simple_kmeans import InvalidArgument, kmeans

log = MyLogger.get_logger()


class ArgumentParser(argparse.ArgumentParser):
    # usage errors exit with status 1
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser():
    parser = ArgumentParser(prog="kmeans2d", description="Cluster 2-D integer points with k-means.")
    parser.add_argument("k", type=int, help="number of clusters")
    parser.add_argument("file", help="input file, one 'x y' pair per line")
    parser.add_argument("--output", default=settings.OUTPUT_FILE,
                        help="where to write 'x y label' lines (default: %(default)s)")
    parser.add_argument("--max-iter", type=int, default=settings.MAX_ITER,
                        help="iteration cap (default: %(default)s)")
    return parser


def fail(message):
    print(message, file=sys.stderr)
    return 1


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.k <= 0:
        return fail("k must be an integer greater than 0.")

    try:
        points = load_points(args.file)
    except OSError as e:
        return fail(f"Error opening input file: {e}")
    except PointFileError as e:
        return fail(f"Error reading input file: {e}")

    if len(points) <= args.k:
        return fail("K must be less than the number of data tuples.")

    print(f"Starting k-means with k={args.k} on {len(points)} tuples.")
    start = time.time()
    try:
        result = kmeans(points, args.k, max_iter=args.max_iter)
    except InvalidArgument as e:
        return fail(str(e))
    runtime = time.time() - start
    print(f"Finished k-means in {runtime:.3f} seconds.")
    log.info("%d iterations, converged=%s", result.iterations, result.converged)

    write_assignments(points, result.labels, args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
