import matplotlib.pyplot as plt
import numpy as np


def circular_layout(g):
    """Place vertices evenly on the unit circle in enumeration order."""
    n = g.num_vertices()
    angles = np.linspace(0.0, 2.0 * np.pi, num=n, endpoint=False)
    return {x: (float(np.cos(a)), float(np.sin(a))) for x, a in zip(g, angles)}


def plot_graph(
    g,
    out_png,
    highlight=(),
    show_weights=True,
    title="Weighted Graph"
):
    """
    Draw the graph on a circular layout, highlighting the given vertices
    (typically the articulation points).
    """
    pos = circular_layout(g)
    highlight = set(highlight)

    fig, ax = plt.subplots(figsize=(7, 7))

    # Edges
    for e in g.edges():
        (x0, y0), (x1, y1) = pos[e.u], pos[e.v]
        ax.plot([x0, x1], [y0, y1], color="gray", linewidth=1.2, zorder=1)
        if show_weights:
            ax.text(
                (x0 + x1) / 2,
                (y0 + y1) / 2,
                str(e.weight),
                fontsize=8,
                ha="center",
                va="center",
                bbox=dict(boxstyle="round,pad=0.15", fc="white", ec="none", alpha=0.8),
                zorder=2
            )

    # Vertices
    normal = [x for x in g if x not in highlight]
    for group, color, label in ((normal, "cyan", "Vertices"), ([x for x in g if x in highlight], "red", "Articulation points")):
        if not group:
            continue
        xs = np.array([pos[x][0] for x in group])
        ys = np.array([pos[x][1] for x in group])
        ax.scatter(
            xs,
            ys,
            s=300,
            c=color,
            edgecolors="black",
            linewidths=0.8,
            label=label,
            zorder=3
        )

    for x, (px, py) in pos.items():
        ax.text(px, py, str(x), fontsize=9, ha="center", va="center", zorder=4)

    ax.set_title(title)
    ax.set_aspect("equal")
    ax.axis("off")
    if g.num_vertices():
        ax.legend(loc="upper right", framealpha=0.85)

    plt.tight_layout()
    plt.savefig(out_png, dpi=150)
    plt.close(fig)
