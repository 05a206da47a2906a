from breakplan.distribution.base import Distributor
from breakplan.models import DistributionType


class EndDistributor(Distributor):
    """Each break ends on the boundary of an equal partition, so the last one
    ends with the shift."""

    kind = DistributionType.END
    name = "End"

    def first_offset(self, shift_minutes: float, single: float) -> float:
        return shift_minutes / self.n - single

    def spacing(self, shift_minutes: float, single: float) -> float:
        return shift_minutes / self.n
