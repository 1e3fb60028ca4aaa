class ScalerError(ValueError):
    '''
    Base class for errors raised by the scalers.
    '''


class InvalidInputError(ScalerError):
    '''
    Raised when the input to `fit` or `transform` is empty,
    not 2D, or not numeric.
    '''


class StateMismatchError(ScalerError):
    '''
    Raised when `inverse_transform` is called before the scaler
    has been fit, or with a different number of features than the
    scaler was fit on.
    '''


class DegenerateRange:
    '''
    Record of a feature whose fitted range (or computed scale) was
    zero, so the zero-guard replaced its scale with 1. Informational only,
    it is never raised.

    Args
    ----
    feature: int
        Row index of the feature.
    value: float
        The feature's minimum during fitting. This is the
        feature's constant value when its range is zero. When
        scale_min == scale_max on a MinMaxScaler the feature
        may vary, and this is only its minimum.
    '''

    def __init__(self, feature, value):
        self.feature = feature
        self.value = value

    def __eq__(self, other):
        if not isinstance(other, DegenerateRange):
            return NotImplemented
        return self.feature == other.feature and self.value == other.value

    def __repr__(self):
        return f"DegenerateRange(feature={self.feature}, value={self.value})"
