from .frequencyentry import FrequencyEntry
from .frequencytable import FrequencyTable

__all__ = ["FrequencyEntry", "FrequencyTable"]
