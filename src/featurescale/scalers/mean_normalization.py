import numpy as np
from featurescale.scalers.scaler import Scaler, _read_only


class MeanNormalization(Scaler):
    '''
    Centers each feature on its mean and divides by its range.

    Formula:
        X_scaled = (X - X_mean) / (X_max - X_min)

    Notes
    -----
    - Inputs are shaped (num_features, num_samples), so statistics
      are computed across each row.
    - If a feature has zero range (max == min), its scale is set
      to 1 to avoid division by zero. A constant feature therefore
      transforms to all zeros, and the inverse is still exact.

    Example
    -------
        scaler = MeanNormalization()
        X_scaled = scaler.transform(X)
        X_orig = scaler.inverse_transform(X_scaled)
    '''

    def __init__(self):
        super().__init__()
        self._item_mean = None

    @property
    def item_mean(self):
        '''Per-feature mean from the last fit.'''
        return _read_only(self._item_mean)

    def _fit_stats(self, x):
        self._item_mean = np.mean(x, axis=1)
        super()._fit_stats(x)

    def _compute_scale(self, item_range):
        return item_range

    def _forward(self, x):
        return (x - self._item_mean[:, np.newaxis]) / self._scale[:, np.newaxis]

    def _inverse(self, x):
        return (x * self._scale[:, np.newaxis]) + self._item_mean[:, np.newaxis]
