import logging

import numpy as np

from .decorrelator import Decorrelator
from .exceptions import EDSError, InvalidInputError
from .greedy_selector import GreedySelector
from .inverse_transformer import InverseTransformer
from .normalizer import Normalizer

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    'ddof': 1,
    'rank_tol': None,
    'cond_warning': 1e8,
    'show_progress': False,
}


class EDSResult:
    """EDS构造结果，可以按 (eds, eds_pcn) 解包"""

    def __init__(self, eds, eds_pcn, selected, labels, iterations, normalizer=None, decorrelator=None):
        self.eds = eds
        self.eds_pcn = eds_pcn
        self.selected = selected
        self.labels = labels
        self.iterations = iterations
        self.normalizer = normalizer
        self.decorrelator = decorrelator

    @property
    def size(self):
        return self.eds.shape[0]

    def __iter__(self):
        return iter((self.eds, self.eds_pcn))


class PipelineController:
    """流水线控制器：标准化 -> 去相关 -> 贪心选择 -> 逆变换"""

    def __init__(self, config=None):
        config = {} if config is None else dict(config)
        unknown = set(config) - set(DEFAULT_CONFIG)
        if unknown:
            raise InvalidInputError(f"Unknown configuration keys: {sorted(unknown)}")
        self.config = {**DEFAULT_CONFIG, **config}
        self._check_config(self.config)

    def run(self, data, vepsilon):
        """
        构造局部自适应EDS

        Args:
            data: 原始数据 (n, d)
            vepsilon: 每个点的目标最小距离 (n,)

        Returns:
            EDSResult
        """
        try:
            data, vepsilon = self._validate(data, vepsilon)
        except EDSError as ex:
            logger.error("输入检查失败: %s", ex)
            raise

        n, d = data.shape
        logger.info("开始构造EDS: n=%d, d=%d", n, d)

        # 所有点相同时标准化没有定义，结果就是这个点本身
        if np.all(data == data[0]):
            logger.warning("All %d points are identical, returning a single point.", n)
            return EDSResult(
                eds=data[:1].copy(),
                eds_pcn=np.zeros((1, d)),
                selected=np.zeros(1, dtype=np.int64),
                labels=np.zeros(n, dtype=np.int64),
                iterations=1,
            )

        try:
            normalizer = Normalizer(ddof=self.config['ddof'])
            datan = normalizer.fit_transform(data)

            decorrelator = Decorrelator(
                ddof=self.config['ddof'],
                rank_tol=self.config['rank_tol'],
                cond_warning=self.config['cond_warning'],
            )
            pcn = decorrelator.fit_transform(datan)
        except EDSError as ex:
            logger.error("数据变换失败: %s", ex)
            raise

        selector = GreedySelector(show_progress=self.config['show_progress'])
        selected, labels = selector.select(pcn, vepsilon ** 2)
        eds_pcn = pcn[selected]

        eds = InverseTransformer(normalizer, decorrelator).transform(eds_pcn)
        logger.info("EDS构造完成: %d 个点中保留 %d 个", n, eds.shape[0])

        return EDSResult(eds, eds_pcn, selected, labels, selector.n_iter, normalizer, decorrelator)

    @staticmethod
    def _check_config(config):
        """检查配置取值"""
        ddof = config['ddof']
        if isinstance(ddof, bool) or not isinstance(ddof, (int, np.integer)) or ddof < 0:
            raise InvalidInputError(f"ddof must be a non-negative integer, got {ddof!r}.")

        # rank_tol <= 0 会让数值上为零的奇异值也计入秩
        rank_tol = config['rank_tol']
        if rank_tol is not None and not (_is_real(rank_tol) and np.isfinite(rank_tol) and rank_tol > 0):
            raise InvalidInputError(f"rank_tol must be None or a positive finite number, got {rank_tol!r}.")

        cond_warning = config['cond_warning']
        if not (_is_real(cond_warning) and cond_warning > 0):
            raise InvalidInputError(f"cond_warning must be a positive number, got {cond_warning!r}.")

    @staticmethod
    def _validate(data, vepsilon):
        """输入检查，在任何计算之前完成"""
        data = np.asarray(data, dtype=np.float64)
        if data.ndim != 2 or data.shape[0] == 0 or data.shape[1] == 0:
            raise InvalidInputError(f"Data must be a non-empty n-by-d matrix, got shape {data.shape}.")
        if not np.all(np.isfinite(data)):
            raise InvalidInputError("Data contains NaN or Inf.")

        vepsilon = np.asarray(vepsilon, dtype=np.float64)
        if vepsilon.ndim == 2 and vepsilon.shape[1] == 1:
            vepsilon = vepsilon[:, 0]
        if vepsilon.ndim != 1 or vepsilon.shape[0] != data.shape[0]:
            raise InvalidInputError(
                f"Expected {data.shape[0]} tolerances, got an array of shape {vepsilon.shape}."
            )
        if not np.all(np.isfinite(vepsilon)) or np.any(vepsilon <= 0):
            raise InvalidInputError("Tolerances must be positive and finite.")

        return data, vepsilon


def locally_adaptive_eds(data, vepsilon, config=None):
    """
    构造局部自适应EDS

    Returns:
        eds: 原始坐标中的EDS (M, d)
        eds_pcn: 归一化主成分空间中的EDS (M, d)
    """
    result = PipelineController(config).run(data, vepsilon)
    return result.eds, result.eds_pcn


def uniform_eds(data, epsilon, config=None):
    """所有点使用同一个目标距离的EDS"""
    data = np.asarray(data, dtype=np.float64)
    try:
        if data.ndim != 2:
            raise InvalidInputError(f"Data must be an n-by-d matrix, got shape {data.shape}.")
        if np.ndim(epsilon) != 0 or np.asarray(epsilon).dtype.kind not in "iuf":
            raise InvalidInputError(
                f"epsilon must be a real scalar, got {epsilon!r}; use locally_adaptive_eds for per-point tolerances."
            )
    except InvalidInputError as ex:
        logger.error("输入检查失败: %s", ex)
        raise

    vepsilon = np.full(data.shape[0], float(epsilon))
    return locally_adaptive_eds(data, vepsilon, config)


def _is_real(value):
    return isinstance(value, (int, float, np.integer, np.floating)) and not isinstance(value, bool)
