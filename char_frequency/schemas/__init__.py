from .countparams import CountParams
from .countsummary import CountSummary

__all__ = ["CountParams", "CountSummary"]
