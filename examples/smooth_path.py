"""Example: multi-segment smoothing through a poly-line."""

from curvegraph import Point, smooth_curve_control_points
from curvegraph.geometry import cubic_path_data

POINTS = [Point(0, 0), Point(100, 80), Point(220, 40), Point(300, 120)]


def main() -> None:
    cps = smooth_curve_control_points(POINTS, tension=0.5)
    for i in range(len(POINTS) - 1):
        c1, c2 = cps[2 * i], cps[2 * i + 1]
        print(cubic_path_data(POINTS[i], c1.point, c2.point, POINTS[i + 1]))


if __name__ == "__main__":
    main()
