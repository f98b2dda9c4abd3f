import matplotlib.pyplot as plt
import numpy as np


def _xy(points):
    """取前两维用于散点图，一维数据的纵坐标置零"""
    if points.shape[1] > 1:
        return points[:, 0], points[:, 1]
    return points[:, 0], np.zeros(points.shape[0])


def save_visualization(data, result, filename, show=False):
    """保存可视化结果：原始坐标与归一化主成分空间中的EDS"""
    data = np.asarray(data, dtype=np.float64)
    if result.normalizer is not None:
        pcn = result.decorrelator.transform(result.normalizer.transform(data))
    else:
        pcn = np.zeros_like(data)

    fig = plt.figure(figsize=(12, 6))

    plt.subplot(1, 2, 1)
    plt.scatter(*_xy(data), s=5, c='lightgray')
    plt.scatter(*_xy(result.eds), s=15, c='tab:red')
    plt.title("EDS (original data)")

    plt.subplot(1, 2, 2)
    plt.scatter(*_xy(pcn), s=5, c='lightgray')
    plt.scatter(*_xy(result.eds_pcn), s=15, c='tab:red')
    plt.title("EDS (normalized principal components)")

    plt.subplots_adjust(wspace=0.3)
    plt.savefig(filename)
    if show:
        plt.show()
    plt.close(fig)
    return filename
