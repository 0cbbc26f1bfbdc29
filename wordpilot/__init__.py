from .models import CorrectionResult, Mode
from .corrector import TextCorrector

__all__ = ["CorrectionResult", "Mode", "TextCorrector"]
