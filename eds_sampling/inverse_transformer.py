import numpy as np


class InverseTransformer:
    """逆变换：归一化主成分 -> 标准化数据 -> 原始坐标"""

    def __init__(self, normalizer, decorrelator):
        self.normalizer = normalizer
        self.decorrelator = decorrelator

    def transform(self, eds_pcn):
        """
        把EDS从归一化主成分空间变换回原始坐标

        Args:
            eds_pcn: 归一化主成分空间中的点 (M, d)

        Returns:
            eds: 原始坐标中的点 (M, d)
        """
        eds_pcn = np.atleast_2d(np.asarray(eds_pcn, dtype=np.float64))
        # 依次撤销主成分缩放、旋转和标准化
        edsn = self.decorrelator.inverse_transform(eds_pcn)
        return self.normalizer.inverse_transform(edsn)
