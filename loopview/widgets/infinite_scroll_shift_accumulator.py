class ShiftAccumulator:
    """Net number of whole cells the tiling has shifted since creation."""

    def __init__(self, drift: int = 0):
        self._drift = int(drift)

    @property
    def drift(self) -> int:
        return self._drift

    def add(self, cells: int):
        self._drift += int(cells)

    def reset(self):
        self._drift = 0
