from .csv_reader import load_edges_csv

__all__ = ["load_edges_csv"]
