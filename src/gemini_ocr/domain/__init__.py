from .errors import NoDataError, OperationCancelledError, PromptConfigurationError
from .languages import LangEnum, language_name
from .models import BoxPoint, OcrContent, OcrRequest, OcrResult
from .prompts import Prompt, PromptItem, PromptSet

__all__ = [
    "BoxPoint",
    "LangEnum",
    "NoDataError",
    "OcrContent",
    "OcrRequest",
    "OcrResult",
    "OperationCancelledError",
    "Prompt",
    "PromptConfigurationError",
    "PromptItem",
    "PromptSet",
    "language_name",
]
