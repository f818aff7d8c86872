from .currencies import CurrenciesDataAccess
