from pathlib import Path
from typing import Dict, List, Optional, Union

import matplotlib.pyplot as plt
from matplotlib.ticker import MaxNLocator


class PopulationPlotter:
    def __init__(self, history: Dict[str, List[int]], labels: Optional[Dict[str, str]] = None):
        self.history = history
        self.labels = labels or {"prey": "Prey", "predator": "Predator"}
        self.colors = {"prey": "green", "predator": "red"}
        self.fig = None

    def plot(
        self,
        title: str = "Predator and Prey Population Over Time",
        out_path: Optional[Union[str, Path]] = None,
    ) -> None:
        steps = self.history.get("step", [])
        self.fig, ax = plt.subplots(figsize=(10, 6))
        max_count = 1
        for kind, label in self.labels.items():
            counts = self.history.get(kind, [])
            if counts:
                max_count = max(max_count, max(counts))
            ax.plot(steps, counts, label=f"{label} Population", color=self.colors.get(kind))
        ax.set_xlabel("Time Steps")
        ax.set_ylabel("Population")
        ax.set_title(title)
        ax.legend()
        ax.grid(True)
        if steps:
            ax.set_xlim([steps[0], max(steps[-1], steps[0] + 1)])
        ax.set_ylim([0, max_count])
        ax.yaxis.set_major_locator(MaxNLocator(integer=True))
        self.fig.tight_layout()
        if out_path:
            self.fig.savefig(out_path)
        else:
            plt.show()

    def close(self) -> None:
        if self.fig is not None:
            plt.close(self.fig)
            self.fig = None
