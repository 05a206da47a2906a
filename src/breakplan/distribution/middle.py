from breakplan.distribution.base import Distributor
from breakplan.models import DistributionType


class MiddleDistributor(Distributor):
    """
    Center n breaks on the n inner boundaries of n+1 equal partitions, leaving
    the same buffer before the first and after the last break.

      first = L/(n+1) - len/2
      spacing = L/(n+1)
    """

    kind = DistributionType.MIDDLE
    name = "Middle"

    def first_offset(self, shift_minutes: float, single: float) -> float:
        return shift_minutes / (self.n + 1) - single / 2

    def spacing(self, shift_minutes: float, single: float) -> float:
        return shift_minutes / (self.n + 1)
