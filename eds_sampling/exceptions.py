"""EDS构造过程中的异常"""


class EDSError(Exception):
    """EDS异常基类"""


class InvalidInputError(EDSError, ValueError):
    """输入数据或容差向量不合法（形状不匹配、非有限值、零方差列等）"""


class NumericalError(EDSError, ArithmeticError):
    """去相关步骤中出现数值秩亏"""
