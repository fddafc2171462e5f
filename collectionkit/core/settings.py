class CollectionSettings:
    """
    Holds the buffer growth policy shared by array-backed containers so that
    every buffer grows consistently.
    """

    def __init__(self, initial_capacity: int = 4, growth_factor: float = 2.0):
        self._initial_capacity = 4
        self._growth_factor = 2.0  # multiplier: 2.0× by default
        self.set_initial_capacity(initial_capacity)
        self.set_growth_factor(growth_factor)

    @property
    def initial_capacity(self) -> int:
        return self._initial_capacity

    @property
    def growth_factor(self) -> float:
        return self._growth_factor

    def set_initial_capacity(self, value: int):
        """Clamp the starting buffer size (1 – 1024 slots)."""
        self._initial_capacity = max(1, min(1024, int(value)))

    def set_growth_factor(self, value: float):
        """Clamp the growth multiplier (1.25× – 4×)."""
        self._growth_factor = max(1.25, min(4.0, float(value)))

    def grow(self, capacity: int) -> int:
        """
        Convert a full buffer's capacity into the next capacity. The result
        always leaves room for at least one more element.
        """
        if capacity <= 0:
            return self._initial_capacity
        return max(capacity + 1, int(capacity * self._growth_factor))

    def __repr__(self):
        return (
            f"CollectionSettings(initial_capacity={self._initial_capacity}, "
            f"growth_factor={self._growth_factor})"
        )


default_settings = CollectionSettings()
