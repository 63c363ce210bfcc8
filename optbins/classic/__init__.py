from .brhist import brhist_classic, choose_bin_count_classic

__all__ = ('brhist_classic', 'choose_bin_count_classic')
