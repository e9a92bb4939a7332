"""
BAC decay graph. Produces an image file or returns data for the web UI.
"""

from pathlib import Path
from typing import List, Tuple

from cocktail_bac.calculations import decay_curve
from cocktail_bac.risk import LEGAL_LIMIT_BAC


def curve_data(initial_bac: float, step_hours: float = 0.25, max_hours: float = 12.0) -> List[Tuple[float, float]]:
    """(hours, bac) from the moment of drinking, for any frontend."""
    return decay_curve(initial_bac, step_hours=step_hours, max_hours=max_hours)


def save_bac_graph(
    initial_bac: float,
    output_path: str = "bac_graph.png",
    step_hours: float = 0.25,
    max_hours: float = 12.0,
    title: str = "Estimated BAC after one serving",
) -> str:
    """
    Plot the decay curve with matplotlib and save to file.
    Returns path to saved file.
    """
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    points = curve_data(initial_bac, step_hours=step_hours, max_hours=max_hours)
    hours, bacs = zip(*points)
    # Plot in percent units, as shown to users.
    percents = [b * 100 for b in bacs]

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.plot(hours, percents, color="#2563eb", linewidth=2, label="BAC")
    ax.fill_between(hours, percents, alpha=0.2, color="#2563eb")
    ax.axhline(y=LEGAL_LIMIT_BAC * 100, color="#dc2626", linestyle="--", linewidth=1, label="Legal limit (0.08%)")
    ax.set_xlabel("Hours since drinking")
    ax.set_ylabel("BAC (%)")
    ax.set_title(title)
    ax.legend(loc="upper right")
    ax.set_ylim(bottom=0)
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    return output_path
