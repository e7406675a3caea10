from .featureset import (
    FeatureSet, MAX_FEATURE_BIT, is_valid, display_name, maximum_feature_bit
)
from .invoice import MAX_BOLT11_FEATURE

__version__ = "0.1.0"

__all__ = [
    "FeatureSet",
    "MAX_FEATURE_BIT",
    "MAX_BOLT11_FEATURE",
    "is_valid",
    "display_name",
    "maximum_feature_bit",
    "__version__",
]
