"""Plot the braking-distance target speed used by the position updater.

We plot, for a few decelerations:
    v(d) = min(v_max, sqrt(2 * deceleration * d))

Near the target the approach speed falls off like sqrt(d); far away it is
capped by v_max.
"""

from __future__ import annotations

import numpy as np
import matplotlib.pyplot as plt

from config_param import PU_MAX_SPEED


def target_speed(dist: np.ndarray, max_speed: float, deceleration: float) -> np.ndarray:
    return np.minimum(max_speed, np.sqrt(dist * 2.0 * deceleration))


def main() -> None:
    # The farthest a target can be on the normalized track is 2 units.
    dist = np.linspace(0.0, 2.0, 2001)

    plt.figure(figsize=(8.5, 5.5))
    plt.axhline(PU_MAX_SPEED, color="0.35", linestyle="--", linewidth=2, label=r"$v_{max}$")

    for deceleration in (0.5, 2.0, 8.0):
        v = target_speed(dist, max_speed=PU_MAX_SPEED, deceleration=deceleration)
        plt.plot(dist, v, linewidth=2, label=rf"$\min(v_{{max}}, \sqrt{{2 \cdot {deceleration} \cdot d}})$")

    plt.title("Target speed vs distance to target")
    plt.xlabel("distance to target (track units)")
    plt.ylabel("target speed (units/s)")
    plt.grid(True, alpha=0.25)
    plt.legend(loc="best")
    plt.tight_layout()

    out = "braking_curve.png"
    plt.savefig(out, dpi=160)
    print(f"Saved: {out}")


if __name__ == "__main__":
    main()
