import json

from wgraph.analysis import GraphReport


class JSONReporter:
    """Generates JSON graph reports"""

    def generate(self, report: GraphReport, output_path: str):
        """Write the report to a JSON file"""
        payload = report.to_dict()

        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2)

        return payload
