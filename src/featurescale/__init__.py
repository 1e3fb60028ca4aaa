import logging

from featurescale.exceptions import (
    DegenerateRange,
    InvalidInputError,
    ScalerError,
    StateMismatchError,
)
from featurescale.scalers import MeanNormalization, MinMaxScaler, Scaler

# stay silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())
