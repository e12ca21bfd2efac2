"""Core-only example (no GrADyS-SIM runtime required).

This script drives a PositionUpdater directly with a fixed time step:

- the target is set to the right end of the track
- the body accelerates, brakes on the braking-distance curve and stops
- halfway through, the target jumps to the left end to show a reversal

It intentionally does NOT build a GrADyS-SIM NG simulation. For the full
integration example (handler + protocol + visualization), use `main.py` and
`protocol.py` at the repository root.

Usage:
    python examples/ex_seek_target.py
"""

from track_mobility import DEFAULT_POSITION_UPDATER_CONFIG, PositionUpdater


def simulate_seek_target():
    """
    Simulate a body seeking two targets in turn.
    """
    print("Core-only demo: braking-distance target speed + limited acceleration + forced stop")

    config = DEFAULT_POSITION_UPDATER_CONFIG
    updater = PositionUpdater(config)
    dt = 0.1

    updater.target = 1.0

    print(f"Config: {config}")
    print(f"dt: {dt} s")
    print("-" * 72)
    print(f"{'t (s)':>6} | {'target':>7} | {'pos':>7} | {'vel':>7} | {'v_tgt':>7} | {'acc':>7}")
    print("-" * 72)

    duration = 6.0
    num_steps = int(duration / dt)

    for step in range(num_steps + 1):
        time = step * dt

        if step == num_steps // 2:
            # Ask for more than the track allows: the target is clamped to -1.
            updater.target = -3.0

        print(
            f"{time:>6.1f} | {updater.target:>7.3f} | {updater.position:>7.3f} | "
            f"{updater.velocity:>7.3f} | {updater.target_velocity:>7.3f} | {updater.acceleration:>7.3f}"
        )

        updater.update(dt)

    print("-" * 72)
    print(f"Final position: {updater.position:.4f}")
    print(f"Final velocity: {updater.velocity:.4f}")


if __name__ == "__main__":
    simulate_seek_target()
