from .enums import MediaKind, Strategy
from .request import CookieFetchRequest
from .response import (
    CarouselItem,
    ErrorEnvelope,
    NormalizedMedia,
    ResultEnvelope,
    SuccessEnvelope,
)

__all__ = [
    "CarouselItem",
    "CookieFetchRequest",
    "ErrorEnvelope",
    "MediaKind",
    "NormalizedMedia",
    "ResultEnvelope",
    "Strategy",
    "SuccessEnvelope",
]
