from breakplan.distribution.base import Distributor
from breakplan.models import DistributionType


class BeginningDistributor(Distributor):
    """First break at shift start, then one break per equal partition."""

    kind = DistributionType.BEGINNING
    name = "Beginning"

    def first_offset(self, shift_minutes: float, single: float) -> float:
        return 0.0

    def spacing(self, shift_minutes: float, single: float) -> float:
        return shift_minutes / self.n
