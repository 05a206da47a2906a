from breakplan.distribution.base import Distributor
from breakplan.models import DistributionType
from breakplan.timemath import hours_part_of, minutes_of


class AfterHoursDistributor(Distributor):
    """
    Fixed "break after K hours worked" policy, independent of shift length.

    The first break starts after_hours_offset into the shift. Later breaks
    follow every whole hour of the offset plus one break length, so an offset
    of "07:30" spaces starts 7h + len apart (the minutes part is ignored).
    """

    kind = DistributionType.AFTER_HOURS
    name = "AfterHours"

    def first_offset(self, shift_minutes: float, single: float) -> float:
        return minutes_of(self.rule.after_hours_offset)

    def spacing(self, shift_minutes: float, single: float) -> float:
        return hours_part_of(self.rule.after_hours_offset) * 60 + single
