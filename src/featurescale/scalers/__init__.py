# make classes available at the scalers package level
from .scaler import Scaler
from .mean_normalization import MeanNormalization
from .min_max import MinMaxScaler
