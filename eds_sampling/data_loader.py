import os
import logging

import numpy as np
import pandas as pd

from .exceptions import InvalidInputError

logger = logging.getLogger(__name__)


class DataLoader:
    """数据加载器：读取数据与容差，保存EDS结果"""

    def __init__(self, base_path="."):
        self.base_path = base_path

    def _construct_filename(self, prefix, kind):
        """构造结果文件名"""
        return os.path.join(self.base_path, f"{prefix}_{kind}.csv")

    def load_data(self, data_file, epsilon_file):
        """
        加载数据

        Args:
            data_file: 数据文件名，无表头CSV，n行d列
            epsilon_file: 容差文件名，无表头CSV，n行1列

        Returns:
            data: (n, d)
            vepsilon: (n,)
        """
        data = pd.read_csv(os.path.join(self.base_path, data_file), header=None).values
        vepsilon = pd.read_csv(os.path.join(self.base_path, epsilon_file), header=None).values

        if vepsilon.ndim == 2 and vepsilon.shape[1] != 1:
            raise InvalidInputError(f"Tolerance file must have a single column, got {vepsilon.shape[1]}.")
        vepsilon = vepsilon.reshape(-1).astype(np.float64)

        logger.info("加载数据 %s: %d 个点, %d 维", data_file, data.shape[0], data.shape[1])
        return data.astype(np.float64), vepsilon

    def save_results(self, result, prefix):
        """
        保存结果

        Returns:
            写入的文件路径
        """
        os.makedirs(self.base_path, exist_ok=True)
        outputs = {
            'EDS': (result.eds, '%.18e'),
            'EDS_PCn': (result.eds_pcn, '%.18e'),
            'EDS_index': (result.selected.reshape(-1, 1), '%d'),
            'labels': (result.labels.reshape(-1, 1), '%d'),
        }

        paths = []
        for kind, (values, fmt) in outputs.items():
            path = self._construct_filename(prefix, kind)
            np.savetxt(path, values, fmt=fmt, delimiter=",")
            paths.append(path)

        logger.info("结果已保存到 %s", self.base_path)
        return paths
