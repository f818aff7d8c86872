from .currencies import (
    CurrencyDefinition,
    CurrencyDetail,
    CurrencyInfo,
    CurrencyState,
    ReserveCurrency,
    RootCurrency,
)
from .namespaces import NamespaceOption, NamespaceOptionResponse
