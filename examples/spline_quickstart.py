"""
Cubic spline quickstart for robotraj.
- Builds a Euclidean spline through three positions
- Builds a rotation spline through yaw waypoints
- Prints references at a few query times

Run from the repository root:
    python examples/spline_quickstart.py
"""

from spatialmath import UnitQuaternion

from robotraj import CubicSplineTrajectory, SplineMode, rotation_waypoints

TIMES = [0.0, 1.0, 2.5]


def main() -> None:
    xyz = [
        [0.00, 0.10, 0.20],
        [0.00, 0.05, 0.00],
        [0.30, 0.35, 0.30],
    ]
    position = CubicSplineTrajectory(TIMES, xyz, SplineMode.EUCLIDEAN)
    for t in (0.0, 0.5, 1.0, 2.0, 3.0):
        pos, vel, acc = position.evaluate(t)
        print(f"t={t:.2f} pos={pos.round(4)} vel={vel.round(4)} acc={acc.round(4)}")

    quats = [UnitQuaternion.Rz(a) for a in (0.0, 0.4, 0.1)]
    orientation = CubicSplineTrajectory(TIMES, rotation_waypoints(quats), SplineMode.ROTATION)
    for t in (0.25, 1.75):
        rot, rate, _ = orientation.evaluate(t)
        print(f"t={t:.2f} segment={orientation.segment_index(t)} rot={rot.round(4)} rate={rate.round(4)}")


if __name__ == "__main__":
    main()
