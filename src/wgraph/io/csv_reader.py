import logging
from pathlib import Path

import pandas as pd

from wgraph.exceptions import GraphError
from wgraph.graph import WeightedGraph

logger = logging.getLogger(__name__)


def _as_weight(raw: str) -> int:
    if not raw:
        return 1
    try:
        value = float(raw)
    except ValueError as e:
        raise ValueError(f"Invalid weight: {raw!r}") from e
    if not value.is_integer():
        raise ValueError(f"Weight must be a whole number: {raw!r}")
    return int(value)


def load_edges_csv(path: str) -> WeightedGraph:
    """Read an edge list (u,v,weight) into a WeightedGraph.

    Headers are case- and whitespace-insensitive. ``weight`` is optional and
    defaults to 1. A row with an empty ``v`` declares an isolated vertex.
    Vertex labels are kept as strings.
    """
    csv_path = Path(path)
    if not csv_path.exists():
        raise FileNotFoundError(f"CSV not found: {csv_path}")

    df = pd.read_csv(csv_path, dtype=str, keep_default_na=False, encoding="utf-8-sig")
    df.columns = [str(c).strip().lower() for c in df.columns]
    required = {"u", "v"}
    missing = sorted(required - set(df.columns))
    if missing:
        raise ValueError(f"Missing columns: {missing}")
    if "weight" not in df.columns:
        df["weight"] = ""

    g = WeightedGraph()
    for idx, r in enumerate(df.itertuples(index=False), start=2):  # header is line 1
        u, v = str(r.u).strip(), str(r.v).strip()
        try:
            if not u:
                raise ValueError("Empty required field 'u'")
            if not v:
                g.add_vertex(u)
                continue
            weight = _as_weight(str(r.weight).strip())
            previous = g.get_edge_weight(u, v) if g.are_adjacent(u, v) else None
            g.add_edge(u, v, weight)
            if previous is not None and previous != weight:
                logger.warning(
                    "Line %d redefines edge %s-%s: weight %d replaces %d", idx, u, v, weight, previous
                )
        except (ValueError, GraphError) as e:
            # Keep going; one bad row shouldn't kill the analysis
            logger.warning("Skipping invalid row at line %d: %s", idx, e)

    logger.debug("Loaded %r from %s", g, csv_path)
    return g
