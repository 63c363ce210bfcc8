from .brhist import (brhist, choose_bin_count, bincount_pll, penalty,
                     bincounts, bin_range)
from .classic import brhist_classic, choose_bin_count_classic

__version__ = '0.1.0'

__all__ = ('brhist', 'choose_bin_count', 'bincount_pll', 'penalty',
           'bincounts', 'bin_range',
           'brhist_classic', 'choose_bin_count_classic')
