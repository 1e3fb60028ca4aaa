import numpy as np
from featurescale.scalers.scaler import Scaler


class MinMaxScaler(Scaler):
    '''
    Scales each feature to the range (scale_min, scale_max).

    Formula:
        scale = (scale_max - scale_min) / (X_max - X_min)
        X_scaled = (X - X_min) * scale + scale_min

    Notes
    -----
    - Inputs are shaped (num_features, num_samples), so the minimum
      and maximum are computed across each row.
    - A feature with zero range (max == min) is guarded before the
      division and gets a scale of 1, which maps every value of that
      feature to `scale_min`.
    - If `scale_min == scale_max` every scale comes out as zero and
      is replaced by 1 as well. `scale_min < scale_max` isn't checked.
    '''

    def __init__(self, scale_min=0.0, scale_max=1.0):
        '''
        Args
        ----
        scale_min: float
            Lower bound of the target range.
        scale_max: float
            Upper bound of the target range.
        '''
        super().__init__()
        self._scale_min = float(scale_min)
        self._scale_max = float(scale_max)

    @property
    def scale_min(self):
        return self._scale_min

    @property
    def scale_max(self):
        return self._scale_max

    def _compute_scale(self, item_range):
        # guard the denominator, degenerate features are reset to
        # a scale of 1 afterwards
        denom = np.where(item_range == 0, 1, item_range)
        return (self._scale_max - self._scale_min) / denom

    def _forward(self, x):
        scale = self._scale[:, np.newaxis]
        item_min = self._item_min[:, np.newaxis]
        return (x - item_min) * scale + self._scale_min

    def _inverse(self, x):
        scale = self._scale[:, np.newaxis]
        item_min = self._item_min[:, np.newaxis]
        return (x - self._scale_min) / scale + item_min
