# selection/adaptive.py
from utils.generate_candidates import SizeRange


class AdaptiveSizeController:
    '''
    Shrinks the maximum primitive size after long rejection streaks.

    The k-th shrink happens once (iteration - committed) exceeds
    2**k * adapt_rate, so shrinks get further apart as the run goes on.
    '''
    def __init__(self, size: SizeRange, adapt_rate: int, adapt_coeff: float, enabled: bool = True):
        self.size = size
        self.adapt_rate = int(adapt_rate)
        self.adapt_coeff = float(adapt_coeff)
        self.enabled = bool(enabled)
        self.k = 0

    def threshold(self) -> int:
        return (2 ** self.k) * self.adapt_rate

    def observe(self, iteration: int, committed: int) -> bool:
        """Returns True when this call shrank the size range."""
        if not self.enabled:
            return False
        if (iteration - committed) > self.threshold():
            self.size.shrink(self.adapt_coeff)
            self.k += 1
            return True
        return False
