"""Sub-configurations stored inside ``CalculationRules``.

Each type is an immutable value with an ``EMPTY`` default, a canonical text
form accepted back by ``parse``, and structural equality.
"""

from .market_data import MarketDataRules
from .market_data_config import MarketDataConfig, MarketDataKind
from .pricing import PricingRules
from .reporting import ReportingRules
from .text import EMPTY_TEXT

__all__ = [
    'EMPTY_TEXT',
    'MarketDataConfig',
    'MarketDataKind',
    'MarketDataRules',
    'PricingRules',
    'ReportingRules',
]
