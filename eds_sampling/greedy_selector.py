import logging

import numpy as np
from scipy.spatial.distance import cdist
from tqdm import tqdm

from .exceptions import InvalidInputError

logger = logging.getLogger(__name__)


class GreedySelector:
    """
    局部自适应EDS贪心选择器

    每次从剩余点中取平方容差最小的点加入EDS，并删除与它的平方距离不超过
    该点自身平方容差的所有剩余点（包括它自己），直到没有剩余点。
    """

    def __init__(self, show_progress=False):
        self.show_progress = show_progress
        self.n_iter = 0

    def select(self, data, eps2):
        """
        执行贪心选择

        Args:
            data: 归一化主成分坐标 (n_samples, n_features)
            eps2: 每个点的平方容差 (n_samples,)，允许为0

        Returns:
            selected_indexes: 被选中点在输入中的下标，按选择顺序
            labels: 每个输入点被第几个选中点删除
        """
        data = np.asarray(data, dtype=np.float64)
        eps2 = np.asarray(eps2, dtype=np.float64).reshape(-1)
        if data.ndim != 2:
            raise InvalidInputError(f"Expected a 2-D array of points, got shape {data.shape}.")
        n = data.shape[0]
        if eps2.shape[0] != n:
            raise InvalidInputError(f"Got {eps2.shape[0]} squared tolerances for {n} points.")
        if not np.all(np.isfinite(eps2)) or np.any(eps2 < 0):
            raise InvalidInputError("Squared tolerances must be finite and non-negative.")

        # 删除点不会改变剩余点的相对顺序，因此只需排序一次
        remaining = np.argsort(eps2, kind="stable")
        labels = np.full(n, -1, dtype=np.int64)
        selected_indexes = []
        self.n_iter = 0

        with tqdm(total=n, desc="构造EDS", disable=not self.show_progress) as pbar:
            while remaining.size > 0:
                self.n_iter += 1
                idx = remaining[0]
                d2 = cdist(data[idx][np.newaxis, :], data[remaining], metric="sqeuclidean").reshape(-1)
                eliminated = d2 <= eps2[idx]

                labels[remaining[eliminated]] = len(selected_indexes)
                selected_indexes.append(idx)
                remaining = remaining[~eliminated]
                pbar.update(int(np.count_nonzero(eliminated)))

        selected_indexes = np.array(selected_indexes, dtype=np.int64)
        logger.debug("贪心选择结束: %d 次迭代, %d 个点中选出 %d 个", self.n_iter, n, selected_indexes.shape[0])
        return selected_indexes, labels

    def sample(self, data, eps2):
        """返回被选中点的坐标"""
        selected_indexes, _ = self.select(data, eps2)
        return np.asarray(data, dtype=np.float64)[selected_indexes]
