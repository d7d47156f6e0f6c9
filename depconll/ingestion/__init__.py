from .loader import CorpusLoader
from .validators import DataValidator, ValidationResult
