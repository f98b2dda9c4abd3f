import logging

import numpy as np

from .exceptions import InvalidInputError

logger = logging.getLogger(__name__)


class Normalizer:
    """标准化器：每一维减去均值并除以样本标准差"""

    def __init__(self, ddof=1):
        self.ddof = ddof
        self.mean = None
        self.std = None

    def fit(self, data):
        """
        计算每一维的均值和标准差

        Args:
            data: 输入数据 (n_samples, n_features)

        Returns:
            self
        """
        data = np.asarray(data, dtype=np.float64)
        n, d = data.shape
        if n <= self.ddof:
            raise InvalidInputError(
                f"At least {self.ddof + 1} samples are required to estimate the standard deviation, got {n}."
            )

        mean = np.mean(data, axis=0)
        std = np.std(data, axis=0, ddof=self.ddof)

        # 零方差列会导致除零
        bad = np.flatnonzero(~np.isfinite(std) | (std == 0))
        if bad.size > 0:
            raise InvalidInputError(f"Columns {bad.tolist()} have zero variance and cannot be normalized.")

        self.mean = mean
        self.std = std
        logger.debug("标准化参数: mean=%s, std=%s", mean, std)
        return self

    def transform(self, data):
        """数据标准化"""
        self._check_fitted()
        return (np.asarray(data, dtype=np.float64) - self.mean) / self.std

    def inverse_transform(self, datan):
        """反标准化，恢复原始尺度"""
        self._check_fitted()
        return np.asarray(datan, dtype=np.float64) * self.std + self.mean

    def fit_transform(self, data):
        return self.fit(data).transform(data)

    def _check_fitted(self):
        if self.mean is None:
            raise RuntimeError("Normalizer must be fitted before use.")
