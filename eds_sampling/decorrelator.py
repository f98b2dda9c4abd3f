import logging

import numpy as np
from sklearn.decomposition import PCA

from .exceptions import InvalidInputError, NumericalError

logger = logging.getLogger(__name__)


class Decorrelator:
    """
    去相关器

    对标准化数据做奇异值分解，投影到主方向上，再把每个主成分缩放到单位标准差。
    基向量的符号由 scikit-learn 的 svd_flip 约定固定，相同输入得到相同的基。
    """

    def __init__(self, ddof=1, rank_tol=None, cond_warning=1e8):
        self.ddof = ddof
        self.rank_tol = rank_tol
        self.cond_warning = cond_warning
        self.basis = None
        self.singular_values = None
        self.pc_std = None

    def fit(self, datan):
        """
        计算正交基和主成分标准差

        Args:
            datan: 标准化后的数据 (n_samples, n_features)

        Returns:
            self

        Raises:
            NumericalError: 非零奇异值个数少于维数
        """
        datan = np.asarray(datan, dtype=np.float64)
        n, d = datan.shape

        # 中心化后的 n 个样本秩不超过 n-1
        if n <= d:
            raise NumericalError(
                f"Rank deficient data: {n} samples cannot span {d} dimensions after centering."
            )

        pca = PCA(n_components=d, svd_solver="full")
        pca.fit(datan)
        singular_values = pca.singular_values_

        rank_tol = self.rank_tol
        if rank_tol is None:
            rank_tol = max(n, d) * np.finfo(np.float64).eps
        elif not (np.isfinite(rank_tol) and rank_tol > 0):
            raise InvalidInputError(f"rank_tol must be a positive finite number, got {rank_tol!r}.")
        cutoff = rank_tol * singular_values[0]
        rank = int(np.sum(singular_values > cutoff))
        if rank < d:
            raise NumericalError(
                f"Rank deficient data: only {rank} of {d} singular values exceed {cutoff:.3e}."
            )

        cond = singular_values[0] / singular_values[-1]
        if cond > self.cond_warning:
            logger.warning("去相关基的条件数过大: %.3e", cond)
        logger.debug("奇异值: %s", singular_values)

        basis = pca.components_.T
        pc = datan @ basis
        self.basis = basis
        self.singular_values = singular_values
        self.pc_std = np.std(pc, axis=0, ddof=self.ddof)
        return self

    def transform(self, datan):
        """投影到主成分并归一化到单位标准差"""
        self._check_fitted()
        pc = np.asarray(datan, dtype=np.float64) @ self.basis
        return pc / self.pc_std

    def inverse_transform(self, pcn):
        """从归一化主成分恢复标准化数据"""
        self._check_fitted()
        pc = np.asarray(pcn, dtype=np.float64) * self.pc_std
        return pc @ self.basis.T

    def fit_transform(self, datan):
        return self.fit(datan).transform(datan)

    def _check_fitted(self):
        if self.basis is None:
            raise RuntimeError("Decorrelator must be fitted before use.")
