from .airac import Airac, AIRAC_CYCLE_DAYS

__all__ = ['Airac', 'AIRAC_CYCLE_DAYS']
