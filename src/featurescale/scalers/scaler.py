import logging

import numpy as np

from featurescale.exceptions import (
    DegenerateRange,
    InvalidInputError,
    StateMismatchError,
)

logger = logging.getLogger(__name__)


class Scaler:
    '''
    Base class for per-feature affine scalers.

    Inputs are 2D arrays laid out with one feature per row and one
    sample per column. Provides the shared fit/transform/inverse
    bookkeeping for MeanNormalization and MinMaxScaler: input
    validation, the fitted statistics, read-only accessors and the
    zero-guard applied to degenerate features. This class should not
    be used directly. Subclasses implement `_compute_scale`,
    `_forward` and `_inverse`, and may extend `_fit_stats`.

    Instances are not thread safe. Fit one instance from a single
    thread, or give each thread its own scaler.
    '''

    def __init__(self):
        self._item_min = None
        self._item_max = None
        self._scale = None
        self._num_features = None
        self._degenerate_ranges = []

    @property
    def is_fit(self):
        return self._scale is not None

    @property
    def num_features(self):
        '''Number of features in the last fit, None before fitting.'''
        return self._num_features

    @property
    def degenerate_ranges(self):
        '''
        Features whose zero-guard fired during the last fit, as a
        list of DegenerateRange records. Returns a copy.
        '''
        return list(self._degenerate_ranges)

    @property
    def item_min(self):
        '''Per-feature minimum from the last fit.'''
        return _read_only(self._item_min)

    @property
    def item_max(self):
        '''Per-feature maximum from the last fit.'''
        return _read_only(self._item_max)

    @property
    def scale(self):
        '''Per-feature scale from the last fit. Never contains zeros.'''
        return _read_only(self._scale)

    def fit(self, x):
        '''
        Compute per-feature statistics, replacing any previous fit.

        Args
        ----
        x: array_like
            2D array of shape (num_features, num_samples).
        '''
        return self._fit(self.validate_input(x))

    def transform(self, x):
        '''
        Fit to the input data, then scale it.

        Args
        ----
        x: array_like
            2D array of shape (num_features, num_samples).

        Returns
        -------
        np.ndarray of the same shape as `x`.
        '''
        x = self.validate_input(x)
        self._fit(x)
        return self._forward(x)

    def fit_transform(self, x):
        '''
        Alias of `transform`, which always fits.
        '''
        return self.transform(x)

    def inverse_transform(self, x):
        '''
        Undo scaling and return values in their original units,
        using the statistics from the last fit.

        Args
        ----
        x: array_like
            2D array of shape (num_features, num_samples).
        '''
        x = self.validate_input(x)
        self.validate_state(x)
        return self._inverse(x)

    def _fit(self, x):
        # x has already been through validate_input
        self._fit_stats(x)
        self._num_features = x.shape[0]
        logger.debug(
            "Fit %s on %d features x %d samples",
            type(self).__name__, x.shape[0], x.shape[1])
        return self

    def _fit_stats(self, x):
        self._item_min = np.min(x, axis=1)
        self._item_max = np.max(x, axis=1)
        item_range = self._item_max - self._item_min
        scale = self._compute_scale(item_range)
        self._scale = self._guard_zeros(scale, degenerate=item_range == 0)

    def _compute_scale(self, item_range):
        raise NotImplementedError

    def _forward(self, x):
        raise NotImplementedError

    def _inverse(self, x):
        raise NotImplementedError

    def _guard_zeros(self, scale, degenerate=None):
        '''
        Replace zeros in `scale` with 1 and record each affected
        feature. `degenerate` flags features that need the guard even
        though their scale isn't zero, i.e. a zero range whose
        denominator was guarded before dividing.
        '''
        mask = scale == 0
        if degenerate is not None:
            mask = mask | degenerate
        scale = np.where(mask, 1, scale).astype(scale.dtype, copy=False)

        self._degenerate_ranges = []
        for i in np.flatnonzero(mask):
            record = DegenerateRange(int(i), float(self._item_min[i]))
            self._degenerate_ranges.append(record)
            logger.info(
                "Feature %d has a degenerate range (value %s), using a scale of 1",
                record.feature, record.value)
        return scale

    @staticmethod
    def validate_input(x):
        '''
        Converts `x` to a floating point array and checks it's a
        non-empty 2D matrix. Floating dtypes are preserved, anything
        else is promoted to float64.
        '''
        try:
            x = np.asarray(x)
        except (TypeError, ValueError) as e:
            raise InvalidInputError(f"Input could not be converted to an array: {e}") from e
        if x.ndim != 2:
            raise InvalidInputError(
                f"Input must be 2D (num_features, num_samples), got {x.ndim}D")
        if x.shape[0] == 0 or x.shape[1] == 0:
            raise InvalidInputError(
                f"Input must have at least one feature and one sample, got shape {x.shape}")
        if np.issubdtype(x.dtype, np.floating):
            return x
        if not (np.issubdtype(x.dtype, np.number) or x.dtype == np.bool_):
            raise InvalidInputError(f"Input must be numeric, got dtype {x.dtype}")
        if np.issubdtype(x.dtype, np.complexfloating):
            raise InvalidInputError("Complex input is not supported")
        return x.astype(np.float64)

    def validate_state(self, x):
        '''
        Validates the scaler has been fit and the input's feature
        count matches the fit.
        '''
        if not self.is_fit:
            raise StateMismatchError(
                f"This {type(self).__name__} has not been fit on input data. "
                "Call transform() or fit() first")
        if self._num_features != x.shape[0]:
            raise StateMismatchError(
                f"Input feature dimension ({x.shape[0]}) does not match "
                f"fitted dimension ({self._num_features}).")


def _read_only(arr):
    if arr is None:
        return None
    view = arr.view()
    view.flags.writeable = False
    return view
